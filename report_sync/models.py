"""
Transient data types of a single trigger invocation.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class BlobDescriptor:
    """Name and last-modified time of a listed blob."""

    name: str
    last_modified: Optional[datetime] = None

    @classmethod
    def from_blob_properties(cls, blob) -> "BlobDescriptor":
        return cls(name=blob.name, last_modified=blob.last_modified)


@dataclass(frozen=True)
class DownloadTarget:
    """Blob to fetch and the local file it is written to."""

    source_name: str
    destination_path: Path


@dataclass(frozen=True)
class DownloadResult:
    """
    Outcome of a download.

    Either succeeded with the number of bytes written to
    target.destination_path, or failed with the error that stopped it.
    """

    target: DownloadTarget
    succeeded: bool
    bytes_written: int = 0
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, target: DownloadTarget, bytes_written: int) -> "DownloadResult":
        return cls(target=target, succeeded=True, bytes_written=bytes_written)

    @classmethod
    def failure(cls, target: DownloadTarget, error: BaseException) -> "DownloadResult":
        return cls(target=target, succeeded=False, error=error)

    @property
    def path(self) -> Path:
        return self.target.destination_path
