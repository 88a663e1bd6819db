"""Infrastructure exceptions for blob storage.

Storage errors extend DocumentHubException so presentation can map them
to HTTP responses consistently.
"""

from app.domain.exceptions import DocumentHubException


class StorageException(DocumentHubException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """File not found in storage."""

    def __init__(self, stored_name: str) -> None:
        super().__init__(
            f"File not found: {stored_name}",
            "STORAGE_NOT_FOUND",
            {"stored_name": stored_name},
        )


class StorageUploadError(StorageException):
    """File write failed."""

    def __init__(self, stored_name: str, reason: str) -> None:
        super().__init__(
            f"Failed to store file: {stored_name}",
            "STORAGE_UPLOAD_ERROR",
            {"stored_name": stored_name, "reason": reason},
        )


class StorageDownloadError(StorageException):
    """File read failed."""

    def __init__(self, stored_name: str, reason: str) -> None:
        super().__init__(
            f"Failed to read file: {stored_name}",
            "STORAGE_DOWNLOAD_ERROR",
            {"stored_name": stored_name, "reason": reason},
        )


class StorageDeleteError(StorageException):
    """File deletion failed."""

    def __init__(self, stored_name: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete file: {stored_name}",
            "STORAGE_DELETE_ERROR",
            {"stored_name": stored_name, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Stored name resolves outside the storage root."""

    def __init__(self, stored_name: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {stored_name}",
            "STORAGE_PERMISSION_ERROR",
            {"stored_name": stored_name, "operation": operation},
        )
