"""Application layer: interfaces, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repository, storage).
"""

from app.application.interfaces import IDocumentRepository
from app.application.use_cases import (
    DashboardService,
    DocumentCommandService,
    DocumentQueryService,
    DocumentUploadService,
)

__all__ = [
    "DashboardService",
    "DocumentCommandService",
    "DocumentQueryService",
    "DocumentUploadService",
    "IDocumentRepository",
]
