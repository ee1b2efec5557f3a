"""
Settings for Latest Report Sync.

Values come from environment variables (Function App settings), falling back
to a local .env or settings.ini file through python-decouple.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from decouple import UndefinedValueError, config

from report_sync.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_REPORTS_DIRNAME = "reports"


def _required(name: str) -> str:
    try:
        value = config(name)
    except UndefinedValueError:
        raise ConfigurationError(f"{name} not configured")
    if not value or not value.strip():
        raise ConfigurationError(f"{name} is blank")
    return value.strip()


@dataclass(frozen=True)
class ReportSettings:
    """Configuration of one report sync pipeline."""

    connection_string: str
    container_name: str
    reports_dir: Path
    fail_on_download_error: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """
        Load settings from the environment.

        Raises:
            ConfigurationError: If the connection string or container name is missing
        """
        connection_string = _required("STORAGE_CONNECTION_STRING")
        container_name = _required("REPORTS_CONTAINER_NAME")

        reports_dir = config("REPORTS_DIRECTORY", default="")
        if reports_dir:
            reports_dir = Path(reports_dir).expanduser()
        else:
            reports_dir = Path.cwd() / DEFAULT_REPORTS_DIRNAME

        settings = cls(
            connection_string=connection_string,
            container_name=container_name,
            reports_dir=reports_dir.resolve(),
            fail_on_download_error=config(
                "REPORTS_FAIL_ON_DOWNLOAD_ERROR", default=False, cast=bool
            ),
            log_level=config("LOG_LEVEL", default="INFO").upper(),
        )
        logger.debug(
            f"⚙️ Loaded settings: container={settings.container_name}, "
            f"reports_dir={settings.reports_dir}"
        )
        return settings
