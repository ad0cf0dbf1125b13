"""Display-only fields added to raw user payloads after each fetch.

The remote API only serves contact data. Avatar URL, join date and the three
activity counters are generated here so cards have something to show. By
default the counters and join date are re-randomized on every fetch; with
``stable=True`` the generator is seeded from the user id instead, so the same
id always gets the same values.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

from .entities import UserRecord

DEFAULT_AVATAR_BASE_URL = "https://i.pravatar.cc/150"
JOIN_YEAR = 2023


def format_join_date(value: date) -> str:
    """Format like ``Mar 5, 2023`` without relying on platform strftime flags."""
    return f"{value:%b} {value.day}, {value.year}"


def avatar_url(user_id: Any, base_url: str = DEFAULT_AVATAR_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}?img={user_id}"


@dataclass
class Enricher:
    """Callable turning one raw payload into a typed ``UserRecord``.

    Attributes:
        avatar_base_url: Base of the avatar service URL; ``?img=<id>`` is appended.
        stable: Seed the random generator per user id instead of sharing ``rng``.
        rng: Generator used when ``stable`` is False. Tests pass a seeded one.
    """

    avatar_base_url: str = DEFAULT_AVATAR_BASE_URL
    stable: bool = False
    rng: Optional[random.Random] = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()

    def __call__(self, payload: Mapping[str, Any]) -> UserRecord:
        if not isinstance(payload, Mapping):
            raise TypeError("User payload must be a mapping.")
        user_id = payload.get("id")
        gen = random.Random(f"user:{user_id}") if self.stable else self.rng

        joined = date(JOIN_YEAR, gen.randint(1, 12), gen.randint(1, 28))
        enriched: Dict[str, Any] = dict(payload)
        enriched.update(
            profileImage=avatar_url(user_id, self.avatar_base_url),
            joinDate=format_join_date(joined),
            posts=gen.randint(1, 50),
            followers=gen.randint(100, 1099),
            following=gen.randint(50, 549),
        )
        return UserRecord.from_payload(enriched)


__all__ = ["DEFAULT_AVATAR_BASE_URL", "Enricher", "avatar_url", "format_join_date"]
