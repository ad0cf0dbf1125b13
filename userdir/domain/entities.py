"""Domain value objects for user records shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

UserId = Union[int, str]


def _as_text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return str(value).strip() if value is not None else ""


def _as_count(payload: Mapping[str, Any], key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError(f"{key} must be an integer count.")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer count.") from exc
    if number < 0:
        raise ValueError(f"{key} must be non-negative.")
    return number


def _as_mapping(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class Company:
    """Employer block nested in a user record."""

    name: str = ""
    catch_phrase: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Company":
        return cls(
            name=_as_text(payload, "name"),
            catch_phrase=_as_text(payload, "catchPhrase"),
        )


@dataclass(frozen=True)
class Address:
    """Postal address block nested in a user record."""

    street: str = ""
    city: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Address":
        return cls(street=_as_text(payload, "street"), city=_as_text(payload, "city"))


@dataclass(frozen=True)
class UserRecord:
    """One directory entry as fetched and enriched by the record source.

    Records are immutable once built; a refresh replaces the whole collection
    instead of editing entries in place.
    """

    id: UserId
    """Key unique within one fetched collection."""
    name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""
    company: Company = Company()
    address: Address = Address()
    profile_image: str = ""
    """Avatar URL derived from ``id`` during enrichment."""
    join_date: str = ""
    """Display date such as ``Mar 5, 2023``; regenerated on every fetch."""
    posts: int = 0
    followers: int = 0
    following: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, (int, str)):
            raise TypeError("UserRecord.id must be an int or str.")
        if isinstance(self.id, str) and not self.id.strip():
            raise ValueError("UserRecord.id must be a non-empty string.")
        for field_name in ("posts", "followers", "following"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"UserRecord.{field_name} must be non-negative.")

    @property
    def key(self) -> str:
        """String form of ``id`` used for lookups from UI tokens."""
        return str(self.id)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserRecord":
        """Build a record from a raw JSON mapping (camelCase keys as served)."""
        if not isinstance(payload, Mapping):
            raise TypeError("UserRecord payload must be a mapping.")
        raw_id = payload.get("id")
        if raw_id is None:
            raise ValueError("UserRecord payload is missing 'id'.")
        return cls(
            id=raw_id,
            name=_as_text(payload, "name"),
            username=_as_text(payload, "username"),
            email=_as_text(payload, "email"),
            phone=_as_text(payload, "phone"),
            website=_as_text(payload, "website"),
            company=Company.from_payload(_as_mapping(payload, "company")),
            address=Address.from_payload(_as_mapping(payload, "address")),
            profile_image=_as_text(payload, "profileImage"),
            join_date=_as_text(payload, "joinDate"),
            posts=_as_count(payload, "posts"),
            followers=_as_count(payload, "followers"),
            following=_as_count(payload, "following"),
        )


__all__ = ["Address", "Company", "UserId", "UserRecord"]
