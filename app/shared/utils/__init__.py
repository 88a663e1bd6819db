"""Shared utilities: datetime and generators."""

from app.shared.utils.datetime import (
    ensure_utc,
    utc_now,
)
from app.shared.utils.generators import (
    epoch_millis,
    generate_cuid,
    generate_document_id,
)

__all__ = [
    "epoch_millis",
    "generate_cuid",
    "generate_document_id",
    "utc_now",
    "ensure_utc",
]
