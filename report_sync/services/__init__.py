"""
Services for the latest report pipeline.

Provides blob storage access, latest-blob selection and the pipeline itself.
"""

from .blob_storage import BlobStorageClient
from .processor import LatestBlobProcessor
from .selection import select_latest

__all__ = ["BlobStorageClient", "LatestBlobProcessor", "select_latest"]
