"""DTOs for document use cases (no dependency on the HTTP layer)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.entities.document import normalize_tags


@dataclass(frozen=True)
class DocumentCreate:
    """Input for creating a document record. Upload service builds this after the blob is written."""

    stored_name: str
    original_name: str
    size: int
    mime_type: str
    title: str = ""
    description: str = ""
    category: str = ""
    department: str = ""
    confidentiality: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DocumentPatch:
    """Whitelisted partial metadata update. None means "leave unchanged".

    Only editable metadata fields exist here; id and file attributes cannot be
    expressed, so they can never be overwritten by an update.
    """

    title: str | None = None
    description: str | None = None
    category: str | None = None
    department: str | None = None
    confidentiality: str | None = None
    tags: tuple[str, ...] | list[str] | str | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were provided, tags normalized."""
        result: dict[str, Any] = {}
        for name in ("title", "description", "category", "department", "confidentiality"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if self.tags is not None:
            result["tags"] = normalize_tags(self.tags)
        return result


@dataclass(frozen=True)
class DocumentFilter:
    """Optional search criteria for listing documents. None or empty string means "no constraint"."""

    q: str | None = None
    category: str | None = None
    department: str | None = None
    status: str | None = None
    confidentiality: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None

