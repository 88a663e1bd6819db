"""Analytics API: dashboard stats and recent activity."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_app_settings, get_dashboard_service
from app.application.use_cases.analytics import DashboardService
from app.core.config import Settings
from app.schemas.analytics import ActivityItemResponse, DashboardStatsResponse

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    dashboard: Annotated[DashboardService, Depends(get_dashboard_service)],
):
    """Return document totals, pending approvals and storage used."""
    return DashboardStatsResponse.model_validate(dashboard.get_stats())


@router.get("/activities", response_model=list[ActivityItemResponse])
async def get_recent_activities(
    dashboard: Annotated[DashboardService, Depends(get_dashboard_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    limit: int | None = Query(None, ge=1, le=100),
):
    """Return the newest history entries across all documents."""
    items = dashboard.recent_activities(limit or settings.recent_activity_limit)
    return [ActivityItemResponse.model_validate(i) for i in items]
