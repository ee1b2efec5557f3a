"""
Logging setup for the Function App process.
"""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send all records to stdout, replacing handlers set up by the host."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
