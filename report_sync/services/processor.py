"""
Latest blob pipeline: enumerate, select, download.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from report_sync.core.utils import build_download_target
from report_sync.models import DownloadResult
from report_sync.services.blob_storage import BlobStorageClient
from report_sync.services.selection import select_latest

logger = logging.getLogger(__name__)


class LatestBlobProcessor:
    """
    Download the most recently modified blob of a container.

    Each call to process() re-lists the container; nothing is kept between
    invocations apart from the files in reports_dir.
    """

    def __init__(
        self,
        storage: BlobStorageClient,
        container_name: str,
        reports_dir: Union[str, Path],
    ):
        self.storage = storage
        self.container_name = container_name
        self.reports_dir = Path(reports_dir)

    def process(self, trigger_name: Optional[str] = None) -> Optional[DownloadResult]:
        """
        Run the pipeline once.

        Args:
            trigger_name: Name of the blob that fired the trigger, only logged

        Returns:
            DownloadResult of the latest blob, or None when the container is empty

        Raises:
            StorageBackendError: If listing the container fails
        """
        if trigger_name:
            logger.info(f"📄 Blob trigger function processed blob: {trigger_name}")

        latest = select_latest(self.storage.iter_blobs(self.container_name))

        if latest is None:
            logger.warning(f"⚠️ No blobs found in container '{self.container_name}'")
            return None

        logger.info(
            f"🔖 Latest blob found: {latest.name} (Last Modified: {latest.last_modified})"
        )

        target = build_download_target(latest.name, self.reports_dir)
        return self.storage.download_blob(self.container_name, target)
