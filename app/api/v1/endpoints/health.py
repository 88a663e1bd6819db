"""Health check endpoint. No dependencies; used for liveness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_app_settings
from app.core.config import Settings
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=settings.app_version)
