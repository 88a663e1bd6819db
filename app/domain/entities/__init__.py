"""Domain entities (business concepts independent of persistence)."""

from app.domain.entities.document import Document, HistoryEntry

__all__ = ["Document", "HistoryEntry"]
