"""Document operations: upload (write), query (read), and commands (update, status, delete)."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import BinaryIO

from app.application.dtos.document import DocumentCreate, DocumentFilter, DocumentPatch
from app.application.interfaces.repositories import IDocumentRepository
from app.application.use_cases.documents.document_filter import build_document_predicate
from app.domain.entities.document import Document, normalize_tags
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.infrastructure.exceptions import StorageException
from app.infrastructure.external.storage.protocol import StorageProtocol

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def _rewind_if_seekable(file_data: BinaryIO) -> None:
    """Reset file position to start if stream is seekable."""
    if getattr(file_data, "seekable", lambda: False)() and file_data.seekable():
        file_data.seek(0)


async def _prepend(first: bytes, rest: AsyncIterator[bytes]) -> AsyncIterator[bytes]:
    if first:
        yield first
    async for chunk in rest:
        yield chunk


class DocumentUploadService:
    """Single responsibility: write the file to blob storage, then create the document record."""

    def __init__(
        self,
        storage_service: StorageProtocol,
        document_repo: IDocumentRepository,
    ) -> None:
        self.storage = storage_service
        self.document_repo = document_repo

    async def upload_document(
        self,
        file_data: BinaryIO | None,
        original_name: str | None,
        actor: str,
        mime_type: str | None = None,
        title: str | None = None,
        description: str | None = None,
        category: str | None = None,
        department: str | None = None,
        confidentiality: str | None = None,
        tags: str | None = None,
    ) -> Document:
        """Store the file and create its record. Raises ValidationException when no file is given.

        The blob is fully written before the record becomes visible; if the
        record cannot be created the blob is removed again.
        """
        if file_data is None or not original_name:
            raise ValidationException("No file uploaded.", field="file")
        _rewind_if_seekable(file_data)
        blob = await self.storage.put(original_name, file_data)
        create_dto = DocumentCreate(
            stored_name=blob.stored_name,
            original_name=original_name,
            size=blob.size,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            title=title or "",
            description=description or "",
            category=category or "",
            department=department or "",
            confidentiality=confidentiality or "",
            tags=normalize_tags(tags),
        )
        try:
            document = self.document_repo.create(create_dto, actor=actor)
        except Exception:
            await self.storage.delete(blob.stored_name)
            raise
        logger.info(
            "New document uploaded: %s (%s, %d bytes)",
            document.id,
            document.original_name,
            document.size,
        )
        return document


class DocumentQueryService:
    """Single responsibility: document lookup, filtered listing and file download."""

    def __init__(
        self,
        storage_service: StorageProtocol,
        document_repo: IDocumentRepository,
    ) -> None:
        self.storage = storage_service
        self.document_repo = document_repo

    def get_document(self, document_id: str) -> Document:
        """Return the document; raise ResourceNotFoundException if absent."""
        document = self.document_repo.get_by_id(document_id)
        if document is None:
            raise ResourceNotFoundException("document", document_id)
        return document

    def list_documents(self, criteria: DocumentFilter | None = None) -> list[Document]:
        """Return documents matching every present criterion, in upload order."""
        return self.document_repo.list_documents(build_document_predicate(criteria))

    async def open_download(self, document_id: str) -> tuple[Document, AsyncIterator[bytes]]:
        """Return the document and a stream of its file content.

        The first chunk is read eagerly so that a missing or unreadable blob
        surfaces as a StorageException before any response is started.
        """
        document = self.get_document(document_id)
        stream = self.storage.download(document.stored_name)
        try:
            first = await anext(stream)
        except StopAsyncIteration:
            first = b""
        except StorageException:
            logger.error("File download error for document %s", document_id)
            raise
        return document, _prepend(first, stream)


class DocumentCommandService:
    """Single responsibility: metadata update, approval decision and deletion."""

    def __init__(
        self,
        storage_service: StorageProtocol,
        document_repo: IDocumentRepository,
    ) -> None:
        self.storage = storage_service
        self.document_repo = document_repo

    def update_document(self, document_id: str, patch: DocumentPatch, actor: str) -> Document:
        """Apply a whitelisted metadata patch; new version plus history entry."""
        updated = self.document_repo.update(document_id, patch, actor=actor)
        if updated is None:
            raise ResourceNotFoundException("document", document_id)
        logger.info("Document updated: %s (version %d)", updated.id, updated.version)
        return updated

    def set_status(self, document_id: str, status: str | None, actor: str) -> Document:
        """Approve or reject. InvalidStatusException for other values, before lookup."""
        updated = self.document_repo.set_status(document_id, status, actor=actor)
        if updated is None:
            raise ResourceNotFoundException("document", document_id)
        logger.info("Document %s status updated to %s", document_id, updated.status.value)
        return updated

    async def delete_document(self, document_id: str) -> bool:
        """Remove the record, then its blob. Returns whether the blob was removed.

        Blob failures are logged and never undo the record removal.
        """
        stored_name = self.document_repo.delete(document_id)
        if stored_name is None:
            raise ResourceNotFoundException("document", document_id)
        logger.info("Document deleted: %s", document_id)
        try:
            removed = await self.storage.delete(stored_name)
        except StorageException as e:
            logger.error(
                "Failed to delete stored file %s for %s: %s",
                stored_name,
                document_id,
                e.details.get("reason", e.message),
            )
            return False
        if not removed:
            logger.warning("Stored file %s for %s was already missing", stored_name, document_id)
        return removed
