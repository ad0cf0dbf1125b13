"""REST adapter reading the user collection from a JSONPlaceholder-style API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from userdir.domain.ports import UserSourcePort

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    error_code,
    error_hint,
    read_error_body,
    status_message,
)
from .http_client import HttpConfig, RetryingSession


class UserRestAdapter(UserSourcePort):
    """Fetches ``GET <base_url>/users`` and returns the raw user mappings."""

    def __init__(
        self,
        base_url: str,
        *,
        users_path: str = "/users",
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 0,
    ) -> None:
        if not str(base_url or "").strip():
            raise ValueError("UserRestAdapter requires a base URL")
        self.base_url = str(base_url).strip()
        self.users_path = users_path if users_path.startswith("/") else f"/{users_path}"
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)
        self._log = logging.getLogger(__name__)

    def fetch_all(self) -> List[Dict[str, Any]]:
        url = self._make_url(self.users_path)
        resp = self.session.get(url)
        self._ensure_ok(resp, "users")
        data = self._json_any(resp, "users")
        if not isinstance(data, list):
            raise ApiError("users: expected list response", context=f"GET {url}")
        users = [entry for entry in data if isinstance(entry, dict)]
        if len(users) != len(data):
            self._log.debug("Dropped %d non-object user entries", len(data) - len(users))
        self._log.info("Fetched %d users from %s", len(users), url)
        return users

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        base = self.base_url
        if base.endswith("/"):
            base = base[:-1]
        return f"{base}{path}"

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        body = read_error_body(resp)
        message = status_message(ctx, status, body)
        if 400 <= status < 500:
            raise ApiClientError(
                message,
                status=status,
                code=error_code(body),
                hint=error_hint(body),
                context=ctx,
            )
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, context=ctx)
        raise ApiError(message, status=status, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = (getattr(resp, "text", "") or "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc


__all__ = ["UserRestAdapter"]
