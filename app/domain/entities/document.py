"""Document domain entity and its audit history.

Documents are immutable values: every change (metadata update, status
update) produces a new revision via dataclasses.replace, so a revision
handed out by the repository never changes underneath its reader.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime

from app.domain.enums import DocumentStatus
from app.domain.exceptions import ValidationException

INITIAL_UPLOAD_SUMMARY = "Initial upload"
METADATA_UPDATED_SUMMARY = "Metadata updated"

UPLOADS_URL_PREFIX = "/uploads"


def normalize_tags(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize tags: split comma-delimited strings, trim, drop empties and duplicates.

    Case is preserved and first-seen order is kept for display.
    """
    if raw is None:
        return ()
    items = raw.split(",") if isinstance(raw, str) else raw
    seen: dict[str, None] = {}
    for item in items:
        tag = str(item).strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


@dataclass(frozen=True)
class HistoryEntry:
    """One audit record describing a single change to a document."""

    timestamp: datetime
    actor: str
    change_summary: str
    version: int = 1


@dataclass(frozen=True)
class Document:
    """Versioned document record.

    File attributes (stored_name, original_name, size, mime_type), id and
    uploaded_at are fixed at creation. history is newest first.
    """

    id: str
    title: str
    description: str
    category: str
    department: str
    confidentiality: str
    stored_name: str
    original_name: str
    size: int
    mime_type: str
    uploaded_at: datetime
    uploaded_by: str
    tags: tuple[str, ...] = ()
    status: DocumentStatus = DocumentStatus.PENDING
    version: int = 1
    history: tuple[HistoryEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate document invariants. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("Document ID is required", field="id")
        if self.size < 0:
            raise ValidationException("File size must be non-negative", field="size")
        if self.version < 1:
            raise ValidationException("Version must be positive", field="version")
        if not self.history:
            raise ValidationException(
                "Document must carry at least one history entry", field="history"
            )

    @property
    def file_path(self) -> str:
        """Public URL under which the stored file is served."""
        return f"{UPLOADS_URL_PREFIX}/{self.stored_name}"

    def with_metadata(
        self, changes: dict[str, object], actor: str, timestamp: datetime
    ) -> Document:
        """Return the next revision with merged metadata, bumped version and a new history entry."""
        next_version = self.version + 1
        entry = HistoryEntry(
            timestamp=timestamp,
            actor=actor,
            change_summary=METADATA_UPDATED_SUMMARY,
            version=next_version,
        )
        return replace(
            self,
            **changes,
            version=next_version,
            history=(entry, *self.history),
        )

    def with_status(self, status: DocumentStatus) -> Document:
        """Return a revision with a new status. Version and history are untouched."""
        return replace(self, status=status)
