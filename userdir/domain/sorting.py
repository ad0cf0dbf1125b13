"""Ordering of user records by a selectable key.

All orderings are stable (``sorted`` guarantees it), so records with equal
keys keep their previous relative order and pagination stays reproducible.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Dict, Iterable, List, Tuple

from .entities import UserRecord

DEFAULT_SORT_KEY = "name"

SORT_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("name", "Name (A-Z)"),
    ("username", "Username"),
    ("email", "Email"),
    ("company", "Company"),
    ("followers", "Followers"),
    ("posts", "Posts"),
)


def collation_key(text: str) -> Tuple[str, str]:
    """Single-locale collation: accent and case insensitive, raw text breaks ties."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text or ""


_TEXT_FIELDS: Dict[str, Callable[[UserRecord], str]] = {
    "name": lambda record: record.name,
    "username": lambda record: record.username,
    "email": lambda record: record.email,
    "company": lambda record: record.company.name,
}

_COUNT_FIELDS: Dict[str, Callable[[UserRecord], int]] = {
    "followers": lambda record: record.followers,
    "posts": lambda record: record.posts,
}


def is_known_sort_key(key: str) -> bool:
    return key in _TEXT_FIELDS or key in _COUNT_FIELDS


def sort_records(records: Iterable[UserRecord], key: str) -> List[UserRecord]:
    """Return a new list ordered by ``key``.

    Text keys sort ascending, counter keys descending. Unknown keys keep the
    input order.
    """
    items = list(records)
    text_getter = _TEXT_FIELDS.get(key)
    if text_getter is not None:
        return sorted(items, key=lambda record: collation_key(text_getter(record)))
    count_getter = _COUNT_FIELDS.get(key)
    if count_getter is not None:
        return sorted(items, key=lambda record: -count_getter(record))
    return items


__all__ = [
    "DEFAULT_SORT_KEY",
    "SORT_OPTIONS",
    "collation_key",
    "is_known_sort_key",
    "sort_records",
]
