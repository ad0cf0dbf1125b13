from __future__ import annotations

from typing import Callable, List

import pytest

from userdir.domain.entities import Address, Company, UserRecord

_NAMES = (
    "Leanne Graham", "Ervin Howell", "Clementine Bauch", "Patricia Lebsack",
    "Chelsey Dietrich", "Dennis Schulist", "Kurtis Weissnat", "Nicholas Runolfsdottir",
    "Glenna Reichert", "Clementina DuBuque", "Ada Okafor", "Mateo Núñez",
)


def _make_user(
    user_id: int,
    name: str = "",
    *,
    username: str = "",
    email: str = "",
    company: str = "Acme",
    city: str = "Gwenborough",
    posts: int = 0,
    followers: int = 0,
) -> UserRecord:
    name = name or f"User {user_id}"
    return UserRecord(
        id=user_id,
        name=name,
        username=username or name.split()[0].lower(),
        email=email or f"{name.split()[0].lower()}@example.org",
        company=Company(name=company, catch_phrase="Synergy"),
        address=Address(street=f"{user_id} Main St", city=city),
        posts=posts,
        followers=followers,
    )


@pytest.fixture()
def make_user() -> Callable[..., UserRecord]:
    return _make_user


@pytest.fixture()
def twelve_users() -> List[UserRecord]:
    """Twelve users in id order; names are not alphabetical."""
    return [
        _make_user(
            index + 1,
            name,
            company=("Romaguera-Crona", "Deckow-Crist", "Keebler LLC")[index % 3],
            city=("Gwenborough", "Wisokyburgh", "McKenziehaven", "South Elvis")[index % 4],
            posts=(index * 7) % 50 + 1,
            followers=100 + (index * 37) % 900,
        )
        for index, name in enumerate(_NAMES)
    ]
