from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from userdir.domain.enrichment import DEFAULT_AVATAR_BASE_URL

ENV_PREFIX = "USERDIR_"
DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass(frozen=True)
class SettingsConfig:
    """Typed runtime settings for the directory, overridable via ``USERDIR_*``."""

    api_base_url: str = DEFAULT_API_BASE_URL
    users_path: str = "/users"
    api_key: Optional[str] = None
    request_timeout_s: int = 10
    retries: int = 0
    page_size: int = 8
    avatar_base_url: str = DEFAULT_AVATAR_BASE_URL
    stable_enrichment: bool = False
    offline: bool = False

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be a positive integer.")
        if self.request_timeout_s < 1:
            raise ValueError("request_timeout_s must be a positive integer.")
        if self.retries < 0:
            raise ValueError("retries must be non-negative.")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "SettingsConfig":
        """Build settings from flat keys, coercing strings from env/CLI input."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        known = {f.name for f in fields(cls)}
        unknown = set(payload.keys()) - known
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")
        return cls().apply(payload)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsConfig":
        """Read ``USERDIR_<FIELD>`` variables, e.g. ``USERDIR_PAGE_SIZE=12``."""
        env = os.environ if environ is None else environ
        payload: Dict[str, Any] = {}
        for f in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is not None and raw.strip():
                payload[f.name] = raw
        return cls().apply(payload)

    def apply(self, payload: Mapping[str, Any]) -> "SettingsConfig":
        """Return a copy with the known keys of ``payload`` applied."""
        updates: Dict[str, Any] = {}
        for f in fields(self):
            if f.name in payload:
                updates[f.name] = _coerce_config_value(f.name, payload[f.name])
        return replace(self, **updates) if updates else self


def _coerce_config_value(key: str, raw: Any) -> Any:
    if key in {"request_timeout_s", "retries", "page_size"}:
        return _coerce_int(key, raw, allow_negative=False)
    if key in {"stable_enrichment", "offline"}:
        return _coerce_bool(raw)
    if key == "api_key":
        text = _coerce_optional_str(raw)
        return text or None
    if key in {"api_base_url", "users_path", "avatar_base_url"}:
        text = _coerce_optional_str(raw)
        if not text:
            raise ValueError(f"{key} must be a non-empty string.")
        return text
    raise ValueError(f"Unhandled config field: {key}")


def _coerce_optional_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if not allow_negative and coerced < 0:
        raise ValueError(f"{name} must be non-negative.")
    return coerced


__all__ = ["DEFAULT_API_BASE_URL", "ENV_PREFIX", "SettingsConfig"]
