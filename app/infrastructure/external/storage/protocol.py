"""Blob storage protocol (DIP). Implementation: LocalStorageService."""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import BinaryIO, Protocol


@dataclass(frozen=True)
class StoredBlob:
    """Result of writing a file to blob storage."""

    stored_name: str
    size: int


class StorageProtocol(Protocol):
    """Protocol for blob storage backends keyed by generated stored names."""

    async def put(self, original_name: str, file_data: BinaryIO) -> StoredBlob:
        """Write file bytes under a new stored name; return the name and byte count."""
        ...

    def download(self, stored_name: str) -> AsyncIterator[bytes]:
        """Stream file content."""
        ...

    async def delete(self, stored_name: str) -> bool:
        """Delete file. Returns True if deleted, False if not found."""
        ...

    async def exists(self, stored_name: str) -> bool:
        """Return True if file exists."""
        ...
