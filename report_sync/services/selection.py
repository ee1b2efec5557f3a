"""
Selection of the most recently modified blob.
"""

from typing import Iterable, Optional

from report_sync.models import BlobDescriptor


def select_latest(blobs: Iterable[BlobDescriptor]) -> Optional[BlobDescriptor]:
    """
    Return the blob with the greatest last_modified, or None for no blobs.

    Single pass over the input. On equal timestamps the first blob seen is
    kept. Blobs without a timestamp only win when no blob has one.
    """
    latest = None
    for blob in blobs:
        if latest is None:
            latest = blob
        elif blob.last_modified is None:
            continue
        elif latest.last_modified is None or blob.last_modified > latest.last_modified:
            latest = blob
    return latest
