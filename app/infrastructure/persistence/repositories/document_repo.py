"""In-memory document repository (process-lifetime metadata store).

One instance is owned by the application and injected where needed. A
single lock serializes every operation so readers always observe a
consistent snapshot. Records are immutable Document revisions; updates
swap in a new revision at the same insertion position.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock

from app.application.dtos.document import DocumentCreate, DocumentPatch
from app.domain.entities.document import (
    INITIAL_UPLOAD_SUMMARY,
    Document,
    HistoryEntry,
)
from app.domain.enums import DocumentStatus
from app.domain.exceptions import InvalidStatusException
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_document_id

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository:
    """Ordered, lock-protected collection of documents keyed by id."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}
        self._issued_ids: set[str] = set()
        self._lock = Lock()

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        """Return the number of documents currently stored."""
        with self._lock:
            return len(self._documents)

    def create(self, data: DocumentCreate, actor: str) -> Document:
        """Insert a new document at version 1, status pending, with its initial history entry."""
        now = utc_now()
        with self._lock:
            document_id = generate_document_id(self._issued_ids, now)
            document = Document(
                id=document_id,
                title=data.title,
                description=data.description,
                category=data.category,
                department=data.department,
                confidentiality=data.confidentiality,
                tags=data.tags,
                stored_name=data.stored_name,
                original_name=data.original_name,
                size=data.size,
                mime_type=data.mime_type,
                uploaded_at=now,
                uploaded_by=actor,
                history=(
                    HistoryEntry(
                        timestamp=now,
                        actor=actor,
                        change_summary=INITIAL_UPLOAD_SUMMARY,
                    ),
                ),
            )
            self._issued_ids.add(document_id)
            self._documents[document_id] = document
        return document

    def get_by_id(self, document_id: str) -> Document | None:
        """Return the document with this id, or None."""
        with self._lock:
            return self._documents.get(document_id)

    def list_documents(self, predicate: Callable[[Document], bool] | None = None) -> list[Document]:
        """Return documents satisfying predicate (all when None) in insertion order."""
        with self._lock:
            snapshot = list(self._documents.values())
        if predicate is None:
            return snapshot
        return [doc for doc in snapshot if predicate(doc)]

    def update(self, document_id: str, patch: DocumentPatch, actor: str) -> Document | None:
        """Merge provided metadata, bump version and prepend a history entry. None if absent."""
        changes = patch.changes()
        with self._lock:
            current = self._documents.get(document_id)
            if current is None:
                return None
            updated = current.with_metadata(changes, actor=actor, timestamp=utc_now())
            self._documents[document_id] = updated
        return updated

    def set_status(self, document_id: str, new_status: str | None, actor: str) -> Document | None:
        """Set an approval decision. Invalid values raise before any lookup. None if absent.

        Status changes do not bump the version nor append history.
        """
        allowed = DocumentStatus.review_outcomes()
        if new_status not in allowed:
            raise InvalidStatusException(new_status, allowed)
        with self._lock:
            current = self._documents.get(document_id)
            if current is None:
                return None
            updated = current.with_status(DocumentStatus(new_status))
            self._documents[document_id] = updated
        logger.debug("Status of %s set to %s by %s", document_id, new_status, actor)
        return updated

    def delete(self, document_id: str) -> str | None:
        """Remove the document and return its stored blob name, or None if absent."""
        with self._lock:
            removed = self._documents.pop(document_id, None)
        if removed is None:
            return None
        return removed.stored_name
