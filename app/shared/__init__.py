"""Shared utilities: datetime, generators and logging setup.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    ensure_utc,
    epoch_millis,
    generate_cuid,
    generate_document_id,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "epoch_millis",
    "generate_cuid",
    "generate_document_id",
    "utc_now",
]
