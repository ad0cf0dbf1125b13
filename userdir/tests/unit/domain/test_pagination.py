from __future__ import annotations

import pytest

from userdir.domain.pagination import PAGE_GAP, clamp_page, page_window, paginate, total_pages


@pytest.mark.parametrize(
    ("count", "size", "expected"),
    [(0, 8, 1), (1, 8, 1), (8, 8, 1), (9, 8, 2), (12, 8, 2), (17, 8, 3)],
)
def test_total_pages(count: int, size: int, expected: int) -> None:
    assert total_pages(count, size) == expected


def test_total_pages_rejects_non_positive_page_size() -> None:
    with pytest.raises(ValueError):
        total_pages(10, 0)


def test_paginate_slices_requested_page() -> None:
    items = list(range(12))
    first = paginate(items, 1, 8)
    second = paginate(items, 2, 8)
    assert first.items == tuple(range(8))
    assert second.items == (8, 9, 10, 11)
    assert first.total_pages == second.total_pages == 2


def test_paginate_clamps_out_of_range_pages() -> None:
    items = list(range(12))
    assert paginate(items, 99, 8).page == 2
    assert paginate(items, 99, 8).items == (8, 9, 10, 11)
    assert paginate(items, 0, 8).page == 1
    assert paginate(items, -3, 8).items == tuple(range(8))


def test_paginate_empty_sequence() -> None:
    result = paginate([], 4, 8)
    assert result.items == ()
    assert result.page == 1
    assert result.total_pages == 1


def test_concatenated_pages_reproduce_sequence() -> None:
    items = [f"u{i}" for i in range(23)]
    pages = total_pages(len(items), 5)
    joined = []
    for page in range(1, pages + 1):
        joined.extend(paginate(items, page, 5).items)
    assert joined == items


def test_page_sizes_follow_remaining_count() -> None:
    items = list(range(19))
    for page in range(1, 4):
        expected = min(8, len(items) - (page - 1) * 8)
        assert len(paginate(items, page, 8).items) == expected


def test_clamp_page() -> None:
    assert clamp_page(5, 3) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(2, 0) == 1


def test_window_for_middle_page() -> None:
    window = page_window(10, 5)
    assert window == (1, PAGE_GAP, 4, 5, 6, PAGE_GAP, 10)
    assert {entry for entry in window if entry != PAGE_GAP} == {1, 4, 5, 6, 10}


@pytest.mark.parametrize(
    ("pages", "current", "expected"),
    [
        (1, 1, (1,)),
        (2, 1, (1, 2)),
        (3, 2, (1, 2, 3)),
        (10, 1, (1, 2, PAGE_GAP, 10)),
        (10, 3, (1, 2, 3, 4, PAGE_GAP, 10)),
        (10, 10, (1, PAGE_GAP, 9, 10)),
        (5, 3, (1, 2, 3, 4, 5)),
    ],
)
def test_window_edges(pages: int, current: int, expected: tuple) -> None:
    assert page_window(pages, current) == expected


def test_window_clamps_current_page() -> None:
    assert page_window(4, 40) == page_window(4, 4) == (1, PAGE_GAP, 3, 4)


def test_window_is_ascending_without_duplicates_or_adjacent_gaps() -> None:
    for pages in range(1, 15):
        for current in range(1, pages + 1):
            window = page_window(pages, current)
            numbers = [entry for entry in window if entry != PAGE_GAP]
            assert numbers == sorted(set(numbers))
            assert window[0] == 1 and window[-1] == pages
            for left, right in zip(window, window[1:]):
                assert not (left == PAGE_GAP and right == PAGE_GAP)
