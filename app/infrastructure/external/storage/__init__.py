"""Blob storage for uploaded document files.

Factory creates the backend from app.core.config. The local filesystem
backend requires aiofiles (main dependency) and implements StorageProtocol
(put, download, delete, exists).
"""

from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.protocol import StorageProtocol, StoredBlob

__all__ = [
    "StorageFactory",
    "StorageProtocol",
    "StoredBlob",
]
