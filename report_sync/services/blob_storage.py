"""
Azure Blob Storage client for report listing and download.

Listing errors are translated into StorageBackendError subclasses and
propagate. Download errors are logged and returned as a failed DownloadResult.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterator

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient

from report_sync.core.exceptions import (
    BackendUnavailable,
    ConfigurationError,
    ContainerNotFound,
)
from report_sync.models import BlobDescriptor, DownloadResult, DownloadTarget

logger = logging.getLogger(__name__)

PARTIAL_PREFIX = ".download-"
PARTIAL_SUFFIX = ".part"


class BlobStorageClient:
    """
    Client for the blob operations of the report pipeline.

    The service client is created lazily from the connection string and
    reused for every call made through this instance.
    """

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        self._client = None

    def get_blob_service_client(self) -> BlobServiceClient:
        """
        Get or create the blob service client.

        Returns:
            BlobServiceClient instance

        Raises:
            ConfigurationError: If the connection string is malformed
        """
        if self._client is None:
            logger.info("🔗 Using connection string for blob storage")
            try:
                self._client = BlobServiceClient.from_connection_string(
                    self.connection_string
                )
            except ValueError as e:
                raise ConfigurationError(f"Invalid storage connection string: {e}") from e
        return self._client

    def iter_blobs(self, container_name: str) -> Iterator[BlobDescriptor]:
        """
        Lazily list every blob of a container.

        Args:
            container_name: Container to enumerate

        Yields:
            BlobDescriptor for each blob, in listing order

        Raises:
            ContainerNotFound: If the container does not exist
            BackendUnavailable: If the storage service cannot be reached
        """
        container_client = self.get_blob_service_client().get_container_client(container_name)
        logger.info(f"📂 Listing blobs in container: {container_name}")

        try:
            for blob in container_client.list_blobs():
                yield BlobDescriptor.from_blob_properties(blob)
        except ResourceNotFoundError as e:
            logger.error(f"❌ Container not found: {container_name}")
            raise ContainerNotFound(container_name) from e
        except AzureError as e:
            logger.error(f"❌ Error listing container {container_name}: {e}")
            raise BackendUnavailable(f"Cannot list container '{container_name}': {e}") from e

    def download_blob(self, container_name: str, target: DownloadTarget) -> DownloadResult:
        """
        Stream a blob into its local destination.

        The content is written to a uniquely named temporary file in the
        reports directory and moved over the destination once complete, so
        the destination is either the previous file or a byte-exact copy of
        the blob, even when several downloads of the same blob overlap.

        Args:
            container_name: Source container
            target: Blob name and local destination path

        Returns:
            DownloadResult carrying the byte count, or the error on failure
        """
        destination = Path(target.destination_path)
        partial_path = None

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)

            blob_client = self.get_blob_service_client().get_blob_client(
                container=container_name, blob=target.source_name
            )

            logger.info(
                f"📥 Starting download of blob '{target.source_name}' to '{destination}'..."
            )

            fd, partial_path = tempfile.mkstemp(
                dir=destination.parent, prefix=PARTIAL_PREFIX, suffix=PARTIAL_SUFFIX
            )
            with os.fdopen(fd, "wb") as download_file:
                stream = blob_client.download_blob()
                bytes_written = stream.readinto(download_file)

            os.replace(partial_path, destination)

        except (AzureError, OSError) as e:
            logger.error(f"❌ Error occurred while downloading blob: {e}")
            if partial_path is not None:
                _remove_partial(Path(partial_path))
            return DownloadResult.failure(target, e)

        logger.info(
            f"✅ Blob '{target.source_name}' downloaded successfully to '{destination}' "
            f"({bytes_written:,} bytes)"
        )
        return DownloadResult.success(target, bytes_written)


def _remove_partial(partial_path: Path) -> None:
    try:
        partial_path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"⚠️ Could not remove partial file {partial_path}: {e}")
