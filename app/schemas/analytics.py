"""Analytics/dashboard API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DashboardStatsResponse(BaseModel):
    """Dashboard counters."""

    model_config = ConfigDict(from_attributes=True)

    total_documents: int
    pending_approvals: int
    storage_used_bytes: int
    storage_used: str = Field(description="Storage used in megabytes, e.g. '1.50 MB'")
    active_users: int


class ActivityItemResponse(BaseModel):
    """One entry of the recent activity feed."""

    model_config = ConfigDict(from_attributes=True)

    document_id: str
    document_title: str
    version: int
    timestamp: datetime
    actor: str
    change_summary: str
