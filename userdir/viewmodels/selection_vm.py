"""Selection state for the user detail view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from userdir.domain.entities import UserRecord


@dataclass(frozen=True)
class SelectionState:
    """Read-only view of the selection; ``detail_visible`` implies ``selected``."""

    selected: Optional[UserRecord] = None
    detail_visible: bool = False


class SelectionVM:
    """Tracks at most one inspected record and whether its detail view is open."""

    def __init__(self) -> None:
        self._selected: Optional[UserRecord] = None
        self._detail_visible = False

    @property
    def selected(self) -> Optional[UserRecord]:
        return self._selected

    @property
    def detail_visible(self) -> bool:
        return self._detail_visible

    def select(self, record: UserRecord) -> None:
        """Open the detail view for ``record``, replacing any previous selection."""
        if not isinstance(record, UserRecord):
            raise TypeError("SelectionVM.select requires a UserRecord.")
        self._selected = record
        self._detail_visible = True

    def close(self) -> None:
        self._detail_visible = False
        self._selected = None

    def snapshot(self) -> SelectionState:
        return SelectionState(selected=self._selected, detail_visible=self._detail_visible)


__all__ = ["SelectionState", "SelectionVM"]
