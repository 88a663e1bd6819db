"""Local filesystem blob store with path validation and atomic writes."""

from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path
from typing import BinaryIO

import aiofiles
import aiofiles.os

from app.infrastructure.exceptions import (
    StorageDeleteError,
    StorageDownloadError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUploadError,
)
from app.infrastructure.external.storage.protocol import StoredBlob
from app.shared.utils.generators import epoch_millis, generate_cuid

FALLBACK_FILENAME = "upload"


def sanitize_filename(filename: str) -> str:
    """Strip path components, NUL bytes and leading/trailing dots or spaces.

    Falls back to a fixed name when nothing usable is left; the stored name
    is always prefixed, so the result only needs to be a safe path segment.
    """
    name = os.path.basename(filename.replace("\\", "/"))
    name = name.replace("\x00", "").strip(". ")
    return name or FALLBACK_FILENAME


class LocalStorageService:
    """Local filesystem storage with atomic writes and path traversal protection.

    Every file lives directly under storage_root as <epoch ms>-<cuid>-<name>.
    Writes use temp file + rename so a stored name never points at a partial file.
    """

    CHUNK_SIZE = 64 * 1024  # 64KB

    def __init__(self, storage_root: str) -> None:
        """Initialize local storage.

        Args:
            storage_root: Base directory for all files; created if missing.
        """
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _get_full_path(self, stored_name: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / stored_name).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(stored_name, "path_validation") from e
        return full_path

    def generate_stored_name(self, original_name: str) -> str:
        """Return a timestamp-prefixed, collision-resistant key keeping the original name."""
        return f"{epoch_millis()}-{generate_cuid()}-{sanitize_filename(original_name)}"

    async def put(self, original_name: str, file_data: BinaryIO) -> StoredBlob:
        """Write file_data under a newly generated stored name (atomic rename)."""
        stored_name = self.generate_stored_name(original_name)
        target_path = self._get_full_path(stored_name)
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.storage_root,
            prefix=".tmp_",
            suffix=target_path.suffix,
        )
        os.close(temp_fd)
        try:
            size = 0
            async with aiofiles.open(temp_path, "wb") as f:
                while chunk := file_data.read(self.CHUNK_SIZE):
                    await f.write(chunk)
                    size += len(chunk)
            os.chmod(temp_path, 0o640)
            os.replace(temp_path, target_path)
        except OSError as e:
            raise StorageUploadError(stored_name, str(e)) from e
        finally:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
        return StoredBlob(stored_name=stored_name, size=size)

    async def download(self, stored_name: str) -> AsyncIterator[bytes]:
        """Stream file content in CHUNK_SIZE pieces."""
        file_path = self._get_full_path(stored_name)
        if not file_path.is_file():
            raise StorageNotFoundError(stored_name)
        try:
            async with aiofiles.open(file_path, "rb") as f:
                while True:
                    chunk = await f.read(self.CHUNK_SIZE)
                    if not chunk:
                        break
                    yield chunk
        except OSError as e:
            raise StorageDownloadError(stored_name, str(e)) from e

    async def delete(self, stored_name: str) -> bool:
        """Delete file. Returns True if deleted, False if it did not exist."""
        file_path = self._get_full_path(stored_name)
        try:
            await aiofiles.os.remove(file_path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageDeleteError(stored_name, str(e)) from e
        return True

    async def exists(self, stored_name: str) -> bool:
        """Return True if file exists."""
        try:
            return self._get_full_path(stored_name).is_file()
        except StoragePermissionError:
            return False
