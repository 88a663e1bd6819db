"""Pytest configuration and fixtures for the document hub.

Every HTTP test gets its own app built by create_app() with a temporary
storage root, so repository state never leaks between tests.
"""

import os
import tempfile

# app.main builds a module-level app on import; keep its storage out of the cwd.
os.environ.setdefault("STORAGE_ROOT", tempfile.mkdtemp(prefix="document-hub-tests-"))

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.infrastructure.external.storage.local_storage import LocalStorageService
from app.infrastructure.persistence.repositories import InMemoryDocumentRepository
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from .env, storing blobs under tmp_path."""
    return Settings(_env_file=None, storage_root=str(tmp_path / "uploads"))


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Fresh application with its own repository and blob store."""
    return create_app(settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def repo() -> InMemoryDocumentRepository:
    """Empty in-memory document repository."""
    return InMemoryDocumentRepository()


@pytest.fixture
def storage(tmp_path) -> LocalStorageService:
    """Local blob store rooted in a temporary directory."""
    return LocalStorageService(storage_root=str(tmp_path / "blobs"))


@pytest.fixture
def upload_document(client: AsyncClient):
    """Return a helper that POSTs a multipart upload and returns the created document JSON."""

    async def _upload(
        content: bytes = b"hello",
        filename: str = "report.pdf",
        mime_type: str = "application/pdf",
        **fields: str,
    ) -> dict:
        response = await client.post(
            "/api/documents",
            files={"file": (filename, content, mime_type)},
            data=fields,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _upload
