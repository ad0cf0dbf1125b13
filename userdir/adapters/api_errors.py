"""Typed failures raised by the user REST adapter.

Call context:
    ``UserRestAdapter`` and ``RetryingSession`` raise these;
    ``userdir.usecases.error_mapping.map_api_error`` turns them into the
    ``UseCaseError`` codes behind the directory's error card.
"""

from __future__ import annotations

from typing import Any, Optional

_DETAIL_KEYS = ("detail", "message", "error")


class ApiError(RuntimeError):
    """Base class for user API failures.

    Attributes:
        status: HTTP status when the server answered, else ``None``.
        code: Machine-readable ``code`` from a JSON error body.
        hint: Human-readable reason from a JSON error body.
        context: Request description such as ``GET <url>`` or ``users``.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.hint = hint
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the user API (bad path, missing or rejected API key)."""


class ApiServerError(ApiError):
    """HTTP 5xx from the user API."""


class ApiTimeoutError(ApiError):
    """The user API did not answer: timeout or connection failure."""


def read_error_body(resp: Any, *, limit: int = 200) -> Any:
    """Return the decoded JSON error body, or a text snippet when it is not JSON."""
    try:
        return resp.json()
    except ValueError:
        text = (getattr(resp, "text", "") or "").strip()
        return text[:limit] or None


def error_hint(body: Any) -> Optional[str]:
    """Read the reason from a JSON object body (``detail``, ``message`` or ``error``)."""
    if not isinstance(body, dict):
        return None
    for key in _DETAIL_KEYS:
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def error_code(body: Any) -> Optional[str]:
    if isinstance(body, dict) and body.get("code") is not None:
        return str(body["code"])
    return None


def status_message(ctx: str, status: int, body: Any) -> str:
    """Return e.g. ``users: Not Found (HTTP 404)``; plain-text bodies count as detail."""
    detail = error_hint(body) or (body if isinstance(body, str) else None)
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


__all__ = [
    "ApiClientError",
    "ApiError",
    "ApiServerError",
    "ApiTimeoutError",
    "error_code",
    "error_hint",
    "read_error_body",
    "status_message",
]
