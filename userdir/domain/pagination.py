"""Fixed-size page slicing and compact pager window computation.

Call context:
    ``DirectoryVM`` paginates the filtered, sorted sequence after every event;
    the rendering layer draws ``page_window`` as the numbered pager.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

PAGE_GAP = "..."
"""Marker placed between non-consecutive page numbers in a page window."""

WindowEntry = Union[int, str]


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of items plus the page metadata it was cut with."""

    items: Tuple[T, ...]
    page: int
    """Effective (clamped) 1-based page number."""
    total_pages: int


def total_pages(count: int, page_size: int) -> int:
    """Return ``max(1, ceil(count / page_size))``."""
    if page_size < 1:
        raise ValueError("page_size must be a positive integer.")
    return max(1, math.ceil(max(count, 0) / page_size))


def clamp_page(page: int, pages: int) -> int:
    """Clamp ``page`` into ``[1, pages]``."""
    return min(max(int(page), 1), max(int(pages), 1))


def paginate(records: Sequence[T], page: int, page_size: int) -> PageResult[T]:
    """Slice ``records`` into the requested page.

    Out-of-range page numbers are clamped instead of raising, so the result
    always describes a valid page (possibly empty when ``records`` is).
    """
    pages = total_pages(len(records), page_size)
    effective = clamp_page(page, pages)
    start = (effective - 1) * page_size
    return PageResult(
        items=tuple(records[start : start + page_size]),
        page=effective,
        total_pages=pages,
    )


def page_window(pages: int, current: int) -> Tuple[WindowEntry, ...]:
    """Return the page numbers for a compact pager.

    The window holds the first page, the last page, and every page within one
    of ``current``, ascending and without duplicates. A single ``PAGE_GAP``
    separates entries that are not consecutive, e.g. ``page_window(10, 5)``
    gives ``(1, "...", 4, 5, 6, "...", 10)``.
    """
    pages = max(int(pages), 1)
    current = clamp_page(current, pages)
    shown = sorted({1, pages, *range(max(current - 1, 1), min(current + 1, pages) + 1)})

    window: List[WindowEntry] = []
    previous = None
    for number in shown:
        if previous is not None and number - previous > 1:
            window.append(PAGE_GAP)
        window.append(number)
        previous = number
    return tuple(window)


__all__ = [
    "PAGE_GAP",
    "PageResult",
    "WindowEntry",
    "clamp_page",
    "page_window",
    "paginate",
    "total_pages",
]
