"""
Custom exceptions for Latest Report Sync.

Enumeration errors propagate to the trigger, download errors are reported
through DownloadResult and only raised when the fail-on-error policy is set.
"""


class ReportSyncError(Exception):
    """Base exception class for all report sync errors."""

    default_detail = "Report sync failed"

    def __init__(self, detail=None):
        self.detail = detail if detail is not None else self.default_detail
        super().__init__(self.detail)


class ConfigurationError(ReportSyncError):
    """Raised when a required setting is missing or blank."""

    default_detail = "Invalid configuration"


class StorageBackendError(ReportSyncError):
    """Raised when the storage backend cannot serve a listing."""

    default_detail = "Storage backend error"


class BackendUnavailable(StorageBackendError):
    """Raised when the storage service cannot be reached."""

    default_detail = "Storage service unavailable"


class ContainerNotFound(StorageBackendError):
    """Raised when the configured container does not exist."""

    default_detail = "Container not found"

    def __init__(self, container_name: str, detail=None):
        self.container_name = container_name
        super().__init__(detail or f"Container '{container_name}' not found")


class DownloadFailedError(ReportSyncError):
    """Raised by the trigger when a failed download must fail the invocation."""

    default_detail = "Blob download failed"

    def __init__(self, result, detail=None):
        self.result = result
        super().__init__(
            detail
            or f"Download of '{result.target.source_name}' failed: {result.error}"
        )
