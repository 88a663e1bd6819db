"""DTOs for analytics/dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class DashboardStats:
    """Dashboard counters derived from repository state."""

    total_documents: int
    pending_approvals: int
    storage_used_bytes: int
    active_users: int

    @property
    def storage_used(self) -> str:
        """Storage used rendered in megabytes with two decimals (e.g. '1.50 MB')."""
        return f"{self.storage_used_bytes / BYTES_PER_MB:.2f} MB"


@dataclass(frozen=True)
class ActivityItem:
    """One history entry flattened together with the document it belongs to."""

    document_id: str
    document_title: str
    version: int
    timestamp: datetime
    actor: str
    change_summary: str
