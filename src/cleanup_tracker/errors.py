"""Application error types."""


class CleanupTrackerError(Exception):
    """Base class for application errors."""


class Unauthorized(CleanupTrackerError):
    """Raised when a write arrives without a submitter identity."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class StorageError(CleanupTrackerError):
    """Raised when the document store fails to read or write."""


class ConfigError(CleanupTrackerError):
    """Raised when required startup configuration is missing."""
