"""Label helpers that turn directory state into display text.

Call context:
    The NiceGUI page in ``userdir.web_ui.main`` calls these when rendering
    cards, the result hint, and the footer.
"""

from __future__ import annotations

from userdir.domain.entities import UserRecord


def plural_users(count: int) -> str:
    return f"{count} user{'' if count == 1 else 's'}"


def compact_count(value: int) -> str:
    """Render counters like cards do: ``1.2k`` from 1000 upward."""
    if value >= 1000:
        return f"{value / 1000:.1f}k"
    return str(value)


def grouped_count(value: int) -> str:
    """Render counters with thousands separators (detail view)."""
    return f"{value:,}"


def results_hint(count: int) -> str:
    return f"{plural_users(count)} found"


def footer_label(shown: int, total: int, search_term: str = "") -> str:
    """Return e.g. ``Showing 8 of 12 users matching "ann"``."""
    label = f"Showing {shown} of {plural_users(total)}"
    term = (search_term or "").strip()
    if term:
        label += f' matching "{term}"'
    return label


def website_url(website: str) -> str:
    text = (website or "").strip()
    if not text or text.startswith(("http://", "https://")):
        return text
    return f"http://{text}"


def address_label(record: UserRecord, *, city_first: bool = False) -> str:
    parts = [record.address.street, record.address.city]
    if city_first:
        parts.reverse()
    return ", ".join(part for part in parts if part)


__all__ = [
    "address_label",
    "compact_count",
    "footer_label",
    "grouped_count",
    "plural_users",
    "results_hint",
    "website_url",
]
