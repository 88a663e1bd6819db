"""Document API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.document import DocumentPatch
from app.domain.enums import DocumentStatus


class HistoryEntryResponse(BaseModel):
    """One audit entry of a document (newest first in DocumentResponse.history)."""

    model_config = ConfigDict(from_attributes=True)

    version: int
    timestamp: datetime
    actor: str
    change_summary: str


class DocumentResponse(BaseModel):
    """Full document record as returned by every document endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    category: str
    department: str
    confidentiality: str
    tags: list[str] = Field(default_factory=list)
    stored_name: str
    original_name: str
    file_path: str
    size: int
    mime_type: str
    status: DocumentStatus
    version: int
    uploaded_at: datetime
    uploaded_by: str
    history: list[HistoryEntryResponse] = Field(default_factory=list)


class DocumentUpdate(BaseModel):
    """Request body for PUT document (partial metadata).

    Only editable metadata is accepted; id, file attributes, status, version
    and history in the payload are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, max_length=512)
    description: str | None = Field(default=None, max_length=10_000)
    category: str | None = Field(default=None, max_length=128)
    department: str | None = Field(default=None, max_length=128)
    confidentiality: str | None = Field(default=None, max_length=64)
    tags: list[str] | str | None = None

    def to_patch(self) -> DocumentPatch:
        """Convert to the whitelisted application patch."""
        return DocumentPatch(
            title=self.title,
            description=self.description,
            category=self.category,
            department=self.department,
            confidentiality=self.confidentiality,
            tags=self.tags,
        )


class DocumentStatusUpdate(BaseModel):
    """Request body for PATCH /{document_id}/status.

    Left untyped so that every unsupported value is answered with 400 by the
    status rule rather than a 422 schema error.
    """

    status: Any = None
