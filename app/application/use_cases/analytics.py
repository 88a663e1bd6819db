"""Analytics use case: dashboard counters and the recent activity feed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.analytics import ActivityItem, DashboardStats
from app.domain.enums import DocumentStatus

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IDocumentRepository

DEFAULT_ACTIVITY_LIMIT = 5


class DashboardService:
    """Derive dashboard stats and the merged history feed from repository state."""

    def __init__(
        self,
        document_repo: IDocumentRepository,
        active_users: int = 5,
    ) -> None:
        self.document_repo = document_repo
        self.active_users = active_users

    def get_stats(self) -> DashboardStats:
        """Return totals over one consistent snapshot of the repository."""
        documents = self.document_repo.list_documents()
        return DashboardStats(
            total_documents=len(documents),
            pending_approvals=sum(
                1 for d in documents if d.status == DocumentStatus.PENDING
            ),
            storage_used_bytes=sum(d.size for d in documents),
            active_users=self.active_users,
        )

    def recent_activities(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> list[ActivityItem]:
        """Return the newest history entries across all documents (newest first).

        Entries with equal timestamps keep their flatten order (document
        insertion order, then history order) since the sort is stable.
        """
        activities = [
            ActivityItem(
                document_id=doc.id,
                document_title=doc.title,
                version=entry.version,
                timestamp=entry.timestamp,
                actor=entry.actor,
                change_summary=entry.change_summary,
            )
            for doc in self.document_repo.list_documents()
            for entry in doc.history
        ]
        activities.sort(key=lambda item: item.timestamp, reverse=True)
        return activities[: max(limit, 0)]
