"""Document use case dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import IDocumentRepository
from app.application.use_cases.documents import (
    DocumentCommandService,
    DocumentQueryService,
    DocumentUploadService,
)
from app.infrastructure.external.storage.protocol import StorageProtocol

from .app_state import get_document_repo, get_storage_service


def get_document_upload_service(
    storage: Annotated[StorageProtocol, Depends(get_storage_service)],
    document_repo: Annotated[IDocumentRepository, Depends(get_document_repo)],
) -> DocumentUploadService:
    """Build DocumentUploadService (blob store + repository)."""
    return DocumentUploadService(storage_service=storage, document_repo=document_repo)


def get_document_query_service(
    storage: Annotated[StorageProtocol, Depends(get_storage_service)],
    document_repo: Annotated[IDocumentRepository, Depends(get_document_repo)],
) -> DocumentQueryService:
    """Build DocumentQueryService for lookup, listing and download."""
    return DocumentQueryService(storage_service=storage, document_repo=document_repo)


def get_document_command_service(
    storage: Annotated[StorageProtocol, Depends(get_storage_service)],
    document_repo: Annotated[IDocumentRepository, Depends(get_document_repo)],
) -> DocumentCommandService:
    """Build DocumentCommandService for update, status change and delete."""
    return DocumentCommandService(storage_service=storage, document_repo=document_repo)
