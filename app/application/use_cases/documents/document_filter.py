"""Document query engine: turns optional criteria into one pure predicate.

Each present criterion contributes an independent check; the resulting
predicate is their conjunction. Absent (None or empty) criteria are no-ops.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from app.application.dtos.document import DocumentFilter
from app.domain.entities.document import Document
from app.shared.utils.datetime import ensure_utc

DocumentPredicate = Callable[[Document], bool]

EXACT_MATCH_FIELDS = ("category", "department", "status", "confidentiality")


def _matches_text(term: str) -> DocumentPredicate:
    needle = term.lower()

    def check(doc: Document) -> bool:
        return (
            needle in doc.title.lower()
            or needle in doc.description.lower()
            or any(needle in tag.lower() for tag in doc.tags)
        )

    return check


def _matches_exact(field_name: str, expected: str) -> DocumentPredicate:
    def check(doc: Document) -> bool:
        value = getattr(doc, field_name)
        # DocumentStatus is a str Enum; compare on its value
        return getattr(value, "value", value) == expected

    return check


def _uploaded_on_or_after(bound: datetime) -> DocumentPredicate:
    lower = ensure_utc(bound)
    return lambda doc: doc.uploaded_at >= lower


def _uploaded_on_or_before(bound: datetime) -> DocumentPredicate:
    upper = ensure_utc(bound)
    return lambda doc: doc.uploaded_at <= upper


def build_criteria(criteria: DocumentFilter) -> list[DocumentPredicate]:
    """Return one predicate per present criterion, in a fixed order."""
    checks: list[DocumentPredicate] = []
    if criteria.q:
        checks.append(_matches_text(criteria.q))
    for field_name in EXACT_MATCH_FIELDS:
        expected = getattr(criteria, field_name)
        if expected:
            checks.append(_matches_exact(field_name, expected))
    if criteria.date_from is not None:
        checks.append(_uploaded_on_or_after(criteria.date_from))
    if criteria.date_to is not None:
        checks.append(_uploaded_on_or_before(criteria.date_to))
    return checks


def build_document_predicate(criteria: DocumentFilter | None) -> DocumentPredicate:
    """Combine all present criteria with logical AND. No criteria matches everything."""
    if criteria is None:
        return lambda doc: True
    checks = build_criteria(criteria)
    return lambda doc: all(check(doc) for check in checks)
