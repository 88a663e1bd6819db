"""Document use cases: upload (write), query (read), and commands (update, status, delete)."""

from app.application.use_cases.documents.document_filter import (
    build_document_predicate,
)
from app.application.use_cases.documents.document_operations import (
    DocumentCommandService,
    DocumentQueryService,
    DocumentUploadService,
)

__all__ = [
    "DocumentCommandService",
    "DocumentQueryService",
    "DocumentUploadService",
    "build_document_predicate",
]
