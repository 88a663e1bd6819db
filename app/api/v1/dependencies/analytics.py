"""Dashboard dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import IDocumentRepository
from app.application.use_cases.analytics import DashboardService
from app.core.config import Settings

from .app_state import get_app_settings, get_document_repo


def get_dashboard_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
    document_repo: Annotated[IDocumentRepository, Depends(get_document_repo)],
) -> DashboardService:
    """Build DashboardService with the configured active-users placeholder."""
    return DashboardService(
        document_repo=document_repo,
        active_users=settings.active_users_placeholder,
    )
