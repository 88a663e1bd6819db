"""Application DTOs."""

from app.application.dtos.analytics import ActivityItem, DashboardStats
from app.application.dtos.document import (
    DocumentCreate,
    DocumentFilter,
    DocumentPatch,
)

__all__ = [
    "ActivityItem",
    "DashboardStats",
    "DocumentCreate",
    "DocumentFilter",
    "DocumentPatch",
]
