"""Application lifespan: startup and shutdown logging.

The repository and blob store are created in create_app() so that they exist
even when the ASGI lifespan protocol is not run (e.g. in-process test clients).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup, yield, then log how many in-memory records are being dropped."""
    settings = app.state.settings
    logger.info(
        "%s %s started (storage root: %s)",
        settings.app_name,
        settings.app_version,
        app.state.storage.storage_root,
    )

    yield

    # Metadata is process-lifetime only; stored files stay on disk.
    logger.info(
        "Shutting down; discarding %d in-memory document records",
        app.state.document_repo.count(),
    )
