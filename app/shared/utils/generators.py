"""ID and value generators (document ids, CUID)."""

from collections.abc import Container
from datetime import datetime

from cuid2 import cuid_wrapper

from app.shared.utils.datetime import utc_now

cuid_generator = cuid_wrapper()

DOCUMENT_ID_PREFIX = "DOC"


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def epoch_millis(moment: datetime | None = None) -> int:
    """Return milliseconds since the Unix epoch for moment (default: now)."""
    return int((moment or utc_now()).timestamp() * 1000)


def generate_document_id(taken: Container[str], moment: datetime | None = None) -> str:
    """Return a time-based document id not contained in taken.

    The id is DOC-<epoch ms>; when that is already taken (several uploads in
    the same millisecond, or a previously issued id) a counter suffix is added.
    """
    base = f"{DOCUMENT_ID_PREFIX}-{epoch_millis(moment)}"
    candidate = base
    counter = 1
    while candidate in taken:
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate
