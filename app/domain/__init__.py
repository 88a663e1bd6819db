"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import Document, HistoryEntry
from app.domain.enums import DocumentStatus
from app.domain.exceptions import (
    DocumentHubException,
    InvalidStatusException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Entities
    "Document",
    "HistoryEntry",
    # Enums
    "DocumentStatus",
    # Exceptions
    "DocumentHubException",
    "InvalidStatusException",
    "ResourceNotFoundException",
    "ValidationException",
]
