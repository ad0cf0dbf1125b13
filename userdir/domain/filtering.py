"""Free-text search over user records.

Call context:
    ``DirectoryVM`` runs this as the first stage of its recompute pipeline,
    before sorting and pagination.
"""

from __future__ import annotations

from typing import Iterable, List

from .entities import UserRecord


def normalize_term(term: str | None) -> str:
    """Return the casefolded, stripped search term ("" means match all)."""
    return (term or "").strip().casefold()


def matches(record: UserRecord, term: str) -> bool:
    """Return True when name, email, or company name contains ``term``.

    ``term`` must already be normalized with :func:`normalize_term`.
    """
    if not term:
        return True
    haystacks = (record.name, record.email, record.company.name)
    return any(term in text.casefold() for text in haystacks)


def filter_records(records: Iterable[UserRecord], term: str | None) -> List[UserRecord]:
    """Return the records matching ``term`` in their original order."""
    needle = normalize_term(term)
    if not needle:
        return list(records)
    return [record for record in records if matches(record, needle)]


__all__ = ["filter_records", "matches", "normalize_term"]
