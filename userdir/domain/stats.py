"""Summary statistics over the unfiltered record collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .entities import UserRecord


@dataclass(frozen=True)
class DirectoryStats:
    """Header counters: total users, distinct cities, distinct companies."""

    total_users: int = 0
    cities: int = 0
    companies: int = 0

    @classmethod
    def from_records(cls, records: Iterable[UserRecord]) -> "DirectoryStats":
        items = list(records)
        return cls(
            total_users=len(items),
            cities=len({record.address.city for record in items}),
            companies=len({record.company.name for record in items}),
        )


__all__ = ["DirectoryStats"]
