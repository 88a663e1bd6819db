"""Pydantic request/response schemas for the API."""

from app.schemas.analytics import ActivityItemResponse, DashboardStatsResponse
from app.schemas.document import (
    DocumentResponse,
    DocumentStatusUpdate,
    DocumentUpdate,
    HistoryEntryResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "ActivityItemResponse",
    "DashboardStatsResponse",
    "DocumentResponse",
    "DocumentStatusUpdate",
    "DocumentUpdate",
    "HealthResponse",
    "HistoryEntryResponse",
]
