"""Directory view-model: search, sort, pagination and selection over the user list.

Call context:
    ``userdir.web_ui.runtime.DirectoryRuntime`` owns one instance per page and
    forwards rendering-layer events to the ``set_*``/``goto_page``/``select``
    handlers; the page re-renders from ``snapshot()``.

Responsibilities:
    - Own the Record Store and be its only writer.
    - Drive the ``LOADING -> READY | FAILED`` lifecycle and discard fetch
      results that a newer refresh has superseded.
    - Recompute the derived view after every event in a fixed order:
      filter, then sort, then paginate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, Tuple

from userdir.domain.entities import UserId, UserRecord
from userdir.domain.filtering import filter_records
from userdir.domain.pagination import WindowEntry, page_window, paginate
from userdir.domain.ports import UseCaseError
from userdir.domain.record_store import DuplicateUserIdError, RecordStore
from userdir.domain.sorting import DEFAULT_SORT_KEY, is_known_sort_key, sort_records
from userdir.domain.stats import DirectoryStats
from .selection_vm import SelectionState, SelectionVM

DEFAULT_PAGE_SIZE = 8

LOAD_FAILED_MESSAGE = "Failed to fetch users. Please check your connection and try again."
REFRESH_FAILED_MESSAGE = "Failed to refresh users. Please try again."


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DirectoryView:
    """Derived projection of the Record Store for one render."""

    search_term: str = ""
    sort_key: str = DEFAULT_SORT_KEY
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 1
    filtered: Tuple[UserRecord, ...] = ()
    """Records matching ``search_term``, in ``sort_key`` order."""
    paged: Tuple[UserRecord, ...] = ()
    page_window: Tuple[WindowEntry, ...] = (1,)

    @property
    def result_count(self) -> int:
        return len(self.filtered)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def show_pager(self) -> bool:
        return self.result_count > self.page_size


@dataclass(frozen=True)
class DirectorySnapshot:
    """Read-only state handed to the rendering layer."""

    phase: Phase
    stats: DirectoryStats
    view: DirectoryView
    selection: SelectionState
    error_message: str = ""
    error_detail: str = ""


@dataclass
class _Inputs:
    search_term: str = ""
    sort_key: str = DEFAULT_SORT_KEY
    current_page: int = 1


@dataclass
class DirectoryVM:
    """Owns directory state and exposes the event handlers the view binds to.

    Attributes:
        fetch_users: Optional synchronous fetcher used by ``refresh``. The
            async runtime leaves it unset and drives ``begin_refresh`` /
            ``apply_records`` / ``apply_failure`` itself.
        on_changed: Called with a fresh snapshot after every handled event.
        page_size: Records per page.
    """

    fetch_users: Optional[Callable[[], Sequence[UserRecord]]] = None
    on_changed: Optional[Callable[[DirectorySnapshot], None]] = None
    page_size: int = DEFAULT_PAGE_SIZE

    phase: Phase = field(default=Phase.LOADING, init=False)
    error_message: str = field(default="", init=False)
    error_detail: str = field(default="", init=False)

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be a positive integer.")
        self._log = logging.getLogger(__name__)
        self.store = RecordStore()
        self.selection = SelectionVM()
        self.stats = DirectoryStats()
        self._inputs = _Inputs()
        self._view = DirectoryView(page_size=self.page_size)
        self._latest_token = 0
        self._loaded_once = False

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    @property
    def view(self) -> DirectoryView:
        return self._view

    @property
    def latest_token(self) -> int:
        return self._latest_token

    def snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            phase=self.phase,
            stats=self.stats,
            view=self._view,
            selection=self.selection.snapshot(),
            error_message=self.error_message,
            error_detail=self.error_detail,
        )

    # ------------------------------------------------------------------
    # Fetch lifecycle
    # ------------------------------------------------------------------
    def begin_refresh(self) -> int:
        """Enter LOADING and issue a new fetch token.

        Any result tagged with an older token is discarded when it arrives.
        """
        self._latest_token += 1
        self.phase = Phase.LOADING
        self.error_message = ""
        self.error_detail = ""
        self._view = self._empty_view()
        self._log.info("Loading users (token %d)", self._latest_token)
        self._notify()
        return self._latest_token

    def apply_records(self, token: int, records: Iterable[UserRecord]) -> bool:
        """Install a successful fetch result; returns False when it was stale."""
        if token != self._latest_token:
            self._log.debug("Discarding stale user list (token %d, latest %d)", token, self._latest_token)
            return False
        try:
            self.store.replace(records)
        except DuplicateUserIdError as exc:
            return self.apply_failure(token, UseCaseError("INVALID_PAYLOAD", str(exc)))

        self.stats = DirectoryStats.from_records(self.store.records)
        self._inputs.search_term = ""
        self._inputs.current_page = 1
        self._revalidate_selection()
        self.phase = Phase.READY
        self._loaded_once = True
        self._log.info("Directory ready with %d users", len(self.store))
        self._recompute()
        self._notify()
        return True

    def apply_failure(self, token: int, error: Exception) -> bool:
        """Enter FAILED for the latest token; returns False when it was stale."""
        if token != self._latest_token:
            self._log.debug("Discarding stale fetch failure (token %d, latest %d)", token, self._latest_token)
            return False
        self.phase = Phase.FAILED
        self.error_message = REFRESH_FAILED_MESSAGE if self._loaded_once else LOAD_FAILED_MESSAGE
        self.error_detail = error.message if isinstance(error, UseCaseError) else str(error)
        self._view = self._empty_view()
        self.selection.close()
        self._log.warning("User fetch failed: %s", self.error_detail or error)
        self._notify()
        return True

    def refresh(self) -> int:
        """Start a refresh and, when a fetcher is bound, complete it synchronously."""
        token = self.begin_refresh()
        if self.fetch_users is None:
            return token
        try:
            records = self.fetch_users()
        except UseCaseError as exc:
            self.apply_failure(token, exc)
        else:
            self.apply_records(token, records)
        return token

    # ------------------------------------------------------------------
    # View events
    # ------------------------------------------------------------------
    def set_search_term(self, text: Optional[str]) -> None:
        self._inputs.search_term = text or ""
        self._inputs.current_page = 1
        self._recompute()
        self._notify()

    def clear_search(self) -> None:
        self.set_search_term("")

    def set_sort_key(self, key: str) -> None:
        """Change the ordering; unknown keys are kept and leave the order as filtered."""
        key = str(key or "").strip()
        if not is_known_sort_key(key):
            self._log.warning("Unknown sort key %r, keeping filter order", key)
        self._inputs.sort_key = key
        self._recompute()
        self._notify()

    def goto_page(self, page: int) -> None:
        """Jump to ``page``; values outside ``[1, total_pages]`` are clamped."""
        self._inputs.current_page = int(page)
        self._recompute()
        self._notify()

    def next_page(self) -> None:
        self.goto_page(self._view.current_page + 1)

    def previous_page(self) -> None:
        self.goto_page(self._view.current_page - 1)

    def select(self, user_id: UserId) -> bool:
        """Open the detail view for ``user_id``.

        Returns:
            False when the directory is not ready or the id is no longer in
            the Record Store; the selection is cleared in the latter case.
        """
        if self.phase is not Phase.READY:
            return False
        record = self.store.get(user_id)
        if record is None:
            self._log.debug("Selection target %r no longer present", user_id)
            self.selection.close()
            self._notify()
            return False
        self.selection.select(record)
        self._notify()
        return True

    def close_detail(self) -> None:
        self.selection.close()
        self._notify()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _recompute(self) -> None:
        if self.phase is not Phase.READY:
            return
        inputs = self._inputs
        filtered = filter_records(self.store.records, inputs.search_term)
        ordered = sort_records(filtered, inputs.sort_key)
        page = paginate(ordered, inputs.current_page, self.page_size)
        inputs.current_page = page.page
        self._view = DirectoryView(
            search_term=inputs.search_term,
            sort_key=inputs.sort_key,
            current_page=page.page,
            page_size=self.page_size,
            total_pages=page.total_pages,
            filtered=tuple(ordered),
            paged=page.items,
            page_window=page_window(page.total_pages, page.page),
        )

    def _empty_view(self) -> DirectoryView:
        return DirectoryView(
            search_term=self._inputs.search_term,
            sort_key=self._inputs.sort_key,
            page_size=self.page_size,
        )

    def _revalidate_selection(self) -> None:
        current = self.selection.selected
        if current is None:
            return
        fresh = self.store.get(current.id)
        if fresh is None:
            self.selection.close()
        else:
            self.selection.select(fresh)

    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed(self.snapshot())


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DirectorySnapshot",
    "DirectoryView",
    "DirectoryVM",
    "LOAD_FAILED_MESSAGE",
    "Phase",
    "REFRESH_FAILED_MESSAGE",
]
