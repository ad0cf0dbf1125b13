"""Authoritative in-memory collection of the last successfully fetched users.

``DirectoryVM`` is the single writer; everything else reads the ``records``
tuple, which is replaced wholesale and never edited in place.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from .entities import UserId, UserRecord


class DuplicateUserIdError(ValueError):
    """Raised when a collection holds the same id twice."""

    def __init__(self, user_id: UserId) -> None:
        super().__init__(f"Duplicate user id in fetched collection: {user_id!r}")
        self.user_id = user_id


class RecordStore:
    """Owns the current user snapshot and an id index over it."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._records: Tuple[UserRecord, ...] = ()
        self._by_key: Dict[str, UserRecord] = {}
        self.version = 0

    @property
    def records(self) -> Tuple[UserRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def replace(self, records: Iterable[UserRecord]) -> None:
        """Swap in a new snapshot after checking ids are unique.

        Raises:
            DuplicateUserIdError: If two records share an id. The previous
                snapshot is kept in that case.
        """
        items = tuple(records)
        index: Dict[str, UserRecord] = {}
        for record in items:
            if record.key in index:
                raise DuplicateUserIdError(record.id)
            index[record.key] = record
        self._records = items
        self._by_key = index
        self.version += 1
        self._log.debug("Record store v%d holds %d users", self.version, len(items))

    def get(self, user_id: UserId) -> Optional[UserRecord]:
        """Look up a record by id; ``"3"`` and ``3`` address the same record."""
        return self._by_key.get(str(user_id))


__all__ = ["DuplicateUserIdError", "RecordStore"]
