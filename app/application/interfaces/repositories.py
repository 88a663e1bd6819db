"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain entities only.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.document import DocumentCreate, DocumentPatch
    from app.domain.entities.document import Document


class IDocumentRepository(Protocol):
    """Protocol for the document metadata store (DIP)."""

    def count(self) -> int:
        """Return the number of stored documents."""

    def create(self, data: DocumentCreate, actor: str) -> Document:
        """Insert a new document (version 1, pending, initial history entry)."""

    def get_by_id(self, document_id: str) -> Document | None:
        """Return document by ID."""

    def list_documents(
        self, predicate: Callable[[Document], bool] | None = None
    ) -> list[Document]:
        """Return documents satisfying predicate, in insertion order."""

    def update(
        self, document_id: str, patch: DocumentPatch, actor: str
    ) -> Document | None:
        """Merge metadata, bump version, prepend history entry."""

    def set_status(
        self, document_id: str, new_status: str | None, actor: str
    ) -> Document | None:
        """Set approval decision (no version bump, no history entry)."""

    def delete(self, document_id: str) -> str | None:
        """Remove the document; return its stored blob name."""
