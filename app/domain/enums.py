"""Domain enumerations for the document hub.

Enums represent fixed sets of domain values (e.g. document status).
"""

from enum import Enum


class DocumentStatus(str, Enum):
    """Document approval status.

    Documents start as PENDING and move to APPROVED or REJECTED only through
    the status-update operation.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def review_outcomes(cls) -> list[str]:
        """Return the values a status update may set (approval decisions)."""
        return [cls.APPROVED.value, cls.REJECTED.value]
