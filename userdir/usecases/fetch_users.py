"""Use case for loading the user collection and enriching it for display.

Call context:
    ``DirectoryVM.refresh`` (synchronous wiring) and
    ``DirectoryRuntime.refresh`` (async wiring) call this once on mount and
    once per explicit refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Set, Tuple

from userdir.domain.entities import UserRecord
from userdir.domain.enrichment import Enricher
from userdir.domain.ports import UseCaseError, UserSourcePort
from userdir.usecases.error_mapping import map_api_error


@dataclass
class FetchUsers:
    """Use-case callable returning the enriched, typed user collection.

    Attributes:
        source: Port implementation that serves raw user payloads.
        enrich: Converts one raw payload into a ``UserRecord``.
    """

    source: UserSourcePort
    enrich: Callable[[Mapping[str, Any]], UserRecord] = field(default_factory=Enricher)

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def __call__(self) -> Tuple[UserRecord, ...]:
        """Fetch and enrich all users.

        Returns:
            Tuple of records in the order served by the source.

        Raises:
            UseCaseError: ``FETCH_FAILED`` (or a transport specific code) when
                the source fails, ``INVALID_PAYLOAD`` when an entry cannot be
                turned into a record or two entries share an id.
        """
        try:
            payloads = self.source.fetch_all()
        except Exception as exc:
            mapped = map_api_error(
                exc,
                default_code="FETCH_FAILED",
                default_message="Failed to fetch users.",
            )
            self._log.warning("User fetch failed (%s): %s", mapped.code, mapped.message)
            raise mapped from exc

        records = []
        seen: Set[str] = set()
        for index, payload in enumerate(payloads):
            try:
                record = self.enrich(payload)
            except (TypeError, ValueError) as exc:
                raise UseCaseError(
                    "INVALID_PAYLOAD",
                    f"User entry #{index + 1} is malformed: {exc}",
                ) from exc
            if record.key in seen:
                raise UseCaseError(
                    "INVALID_PAYLOAD",
                    f"Duplicate user id in response: {record.id!r}",
                    meta={"user_id": record.id},
                )
            seen.add(record.key)
            records.append(record)
        return tuple(records)


__all__ = ["FetchUsers"]
