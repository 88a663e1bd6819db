"""LocalStorageService: stored-name generation, atomic put, streaming, delete."""

import io
import re
import subprocess
import sys
from pathlib import Path

import pytest

from app.infrastructure.exceptions import (
    StorageDeleteError,
    StorageNotFoundError,
    StoragePermissionError,
)
from app.infrastructure.external.storage.local_storage import (
    LocalStorageService,
    sanitize_filename,
)


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_basename_only(self) -> None:
        assert sanitize_filename("report.pdf") == "report.pdf"

    def test_path_stripped(self) -> None:
        assert sanitize_filename("/foo/bar/report.pdf") == "report.pdf"

    def test_windows_path_stripped(self) -> None:
        assert sanitize_filename("C:\\Users\\me\\report.pdf") == "report.pdf"

    def test_null_removed(self) -> None:
        assert sanitize_filename("a\x00b.pdf") == "ab.pdf"

    def test_empty_falls_back(self) -> None:
        assert sanitize_filename("..") == "upload"


async def _read_all(storage: LocalStorageService, stored_name: str) -> bytes:
    return b"".join([chunk async for chunk in storage.download(stored_name)])


async def test_put_writes_file_and_reports_size(storage) -> None:
    blob = await storage.put("report.pdf", io.BytesIO(b"x" * 1000))
    assert blob.size == 1000
    assert re.fullmatch(r"\d{13}-[a-z0-9]+-report\.pdf", blob.stored_name)
    assert (storage.storage_root / blob.stored_name).read_bytes() == b"x" * 1000
    assert await storage.exists(blob.stored_name)


async def test_put_leaves_no_temp_files(storage) -> None:
    await storage.put("a.txt", io.BytesIO(b"abc"))
    assert not [p for p in storage.storage_root.iterdir() if p.name.startswith(".tmp_")]


async def test_same_original_name_gets_distinct_keys(storage) -> None:
    first = await storage.put("same.txt", io.BytesIO(b"1"))
    second = await storage.put("same.txt", io.BytesIO(b"2"))
    assert first.stored_name != second.stored_name
    assert await _read_all(storage, first.stored_name) == b"1"
    assert await _read_all(storage, second.stored_name) == b"2"


async def test_download_streams_in_chunks(storage) -> None:
    payload = b"0123456789" * (LocalStorageService.CHUNK_SIZE // 5)
    blob = await storage.put("big.bin", io.BytesIO(payload))
    chunks = [chunk async for chunk in storage.download(blob.stored_name)]
    assert len(chunks) == 2
    assert b"".join(chunks) == payload


async def test_download_missing_raises_not_found(storage) -> None:
    with pytest.raises(StorageNotFoundError):
        await _read_all(storage, "missing.bin")


async def test_delete_returns_whether_file_existed(storage) -> None:
    blob = await storage.put("a.txt", io.BytesIO(b"abc"))
    assert await storage.delete(blob.stored_name) is True
    assert not await storage.exists(blob.stored_name)
    assert await storage.delete(blob.stored_name) is False


async def test_delete_failure_raises_storage_delete_error(storage) -> None:
    (storage.storage_root / "a-directory").mkdir()
    with pytest.raises(StorageDeleteError):
        await storage.delete("a-directory")


async def test_path_traversal_is_rejected(storage) -> None:
    with pytest.raises(StoragePermissionError):
        await storage.delete("../outside.txt")
    assert await storage.exists("../outside.txt") is False


def test_storage_package_imports_standalone() -> None:
    result = subprocess.run(
        [sys.executable, "-c", "import app.infrastructure.external.storage.local_storage"],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parents[2],
    )
    assert result.returncode == 0, result.stderr
