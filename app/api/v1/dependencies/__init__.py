"""FastAPI dependencies for API v1 (composition root)."""

from .analytics import get_dashboard_service
from .app_state import (
    get_app_settings,
    get_current_actor,
    get_document_repo,
    get_storage_service,
)
from .document import (
    get_document_command_service,
    get_document_query_service,
    get_document_upload_service,
)

__all__ = [
    "get_app_settings",
    "get_current_actor",
    "get_dashboard_service",
    "get_document_command_service",
    "get_document_query_service",
    "get_document_repo",
    "get_document_upload_service",
    "get_storage_service",
]
