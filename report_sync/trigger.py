"""
Invocation policy of the blob trigger.
"""

import logging
from typing import Optional

from report_sync.core.exceptions import DownloadFailedError
from report_sync.models import DownloadResult
from report_sync.services.processor import LatestBlobProcessor

logger = logging.getLogger(__name__)


def handle_trigger(
    processor: LatestBlobProcessor,
    trigger_name: Optional[str],
    fail_on_download_error: bool = False,
) -> Optional[DownloadResult]:
    """
    Process one trigger event.

    Listing errors always propagate. A failed download is already logged by
    the storage client; it only fails the invocation when
    fail_on_download_error is set.

    Raises:
        StorageBackendError: If listing the container fails
        DownloadFailedError: If the download failed and fail_on_download_error is set
    """
    result = processor.process(trigger_name)

    if result is not None and not result.succeeded:
        if fail_on_download_error:
            raise DownloadFailedError(result)
        logger.warning(
            f"⚠️ Download of '{result.target.source_name}' failed, "
            "invocation completes without a new report"
        )

    return result
