"""
Utility functions for turning blob names into local file paths.
"""

import os
import re
from pathlib import Path
from typing import Union

from report_sync.models import DownloadTarget

# Characters rejected by Windows or POSIX in a single path component
_ILLEGAL_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_REPLACEMENT = "-"


def sanitize_blob_name(blob_name: str) -> str:
    """
    Make a blob name safe to use as a local filename.

    Illegal characters become hyphens, so "2024-01-01T00:00:00Z" turns into
    "2024-01-01T00-00-00Z" and virtual folders ("2024/01/report.pdf") are
    flattened. Applying it twice gives the same result as applying it once.

    Args:
        blob_name: Blob name as listed in the container

    Returns:
        A single path component with no separators
    """
    sanitized = _ILLEGAL_FILENAME_CHARS.sub(_REPLACEMENT, blob_name)

    # "." and ".." would point at the reports directory or its parent
    if sanitized and set(sanitized) == {"."}:
        sanitized = _REPLACEMENT * len(sanitized)

    return sanitized


def build_download_target(blob_name: str, reports_dir: Union[str, Path]) -> DownloadTarget:
    """
    Derive the local destination of a blob inside the reports directory.

    Raises:
        ValueError: If the blob name is empty or the path would leave reports_dir
    """
    filename = sanitize_blob_name(blob_name)
    if not filename:
        raise ValueError("Blob name is empty")

    reports_dir = Path(reports_dir)
    destination = reports_dir / filename

    resolved_dir = reports_dir.resolve()
    if Path(os.path.normpath(resolved_dir / filename)).parent != resolved_dir:
        raise ValueError(f"Blob name '{blob_name}' resolves outside {reports_dir}")

    return DownloadTarget(source_name=blob_name, destination_path=destination)
