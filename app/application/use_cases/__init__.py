"""Application use cases: one entry point per workflow."""

from app.application.use_cases.analytics import DashboardService
from app.application.use_cases.documents import (
    DocumentCommandService,
    DocumentQueryService,
    DocumentUploadService,
)

__all__ = [
    "DashboardService",
    "DocumentCommandService",
    "DocumentQueryService",
    "DocumentUploadService",
]
