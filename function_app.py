"""
Azure Function App for Latest Report Sync.

A new blob in the watched container triggers a download of the most recently
modified blob of the configured container into the local reports directory.
Settings are loaded when the host imports this module, so missing
configuration fails the host at start-up rather than each invocation.
"""

import logging

import azure.functions as func

from report_sync.core.logging_config import configure_logging
from report_sync.services import BlobStorageClient, LatestBlobProcessor
from report_sync.settings import ReportSettings
from report_sync.trigger import handle_trigger

settings = ReportSettings.from_env()

# Configure logging
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

storage = BlobStorageClient(settings.connection_string)
storage.get_blob_service_client()

processor = LatestBlobProcessor(
    storage=storage,
    container_name=settings.container_name,
    reports_dir=settings.reports_dir,
)

# Initialize Function App
app = func.FunctionApp()


@app.function_name(name="GetLatestBlobAndProcess")
@app.blob_trigger(
    arg_name="blob",
    path="%REPORTS_TRIGGER_CONTAINER%/{name}",
    connection="AzureWebJobsStorage",
)
def get_latest_blob_and_process(blob: func.InputStream) -> None:
    """
    Download the latest blob of the configured container.

    The triggering blob is only logged; the download target is chosen by
    listing the container again.
    """
    logger.info("=" * 80)
    logger.info("🎉 BLOB TRIGGER FIRED - LATEST REPORT SYNC")
    logger.info(f"📦 Blob size: {blob.length} bytes")

    handle_trigger(
        processor,
        trigger_name=blob.name,
        fail_on_download_error=settings.fail_on_download_error,
    )

    logger.info("=" * 80)
