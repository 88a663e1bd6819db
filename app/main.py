"""FastAPI application entry point.

Wiring only: settings, owned repository and blob store, exception handlers,
middleware, routers and static uploads. No business logic here.

Settings are resolved inside create_app() so that tests can pass their own
Settings (or set env and clear the get_settings cache) before building an app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.v1 import api_router
from app.core.config import Settings, get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.domain.entities.document import UPLOADS_URL_PREFIX
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.repositories import InMemoryDocumentRepository
from app.middleware import RequestIDMiddleware, RequestSizeLimitMiddleware
from app.shared.telemetry import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application with its own repository and storage."""
    settings = settings or get_settings()
    setup_logging(settings)
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.settings = settings
    app.state.storage = StorageFactory.create_storage_service(settings)
    app.state.document_repo = InMemoryDocumentRepository()

    register_exception_handlers(app)

    # Middleware: first added = innermost. Order: request ID → size limit → CORS.
    origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", settings.request_id_header],
    )
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_upload_size)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix=settings.api_prefix)

    if settings.serve_uploads:
        app.mount(
            UPLOADS_URL_PREFIX,
            StaticFiles(directory=str(app.state.storage.storage_root)),
            name="uploads",
        )

    return app


app = create_app()
