"""Application-scoped singletons held on app.state (composition root).

The repository and blob store are built once in create_app(); routes reach
them only through these dependencies, never through module globals.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces.repositories import IDocumentRepository
from app.core.config import Settings
from app.infrastructure.external.storage.protocol import StorageProtocol


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_document_repo(request: Request) -> IDocumentRepository:
    """The single document repository owned by the app."""
    return request.app.state.document_repo


def get_storage_service(request: Request) -> StorageProtocol:
    """The blob store owned by the app."""
    return request.app.state.storage


def get_current_actor(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str:
    """Actor attributed to changes. Fixed mock actor until authentication exists."""
    return settings.mock_actor
