"""Shared HTTP transport utilities for the user REST adapter.

This module provides a thin wrapper around ``requests.Session`` so adapters
share timeout policy, optional retry behavior, and API-key header
construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``userdir.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``userdir.adapters.user_rest.UserRestAdapter``.
    - Used only inside adapter methods; use cases interact through ports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from userdir.adapters.api_errors import ApiError, ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of extra attempts after a timeout or connection
            failure. Defaults to 0 so failures surface to the user, who
            retries explicitly.
    """
    request_timeout_s: int = 10
    retries: int = 0


class RetryingSession:
    """Shared requests wrapper with API-key headers and retry loops.

    This class is transport-only. Callers provide endpoint URLs and decide how
    to map non-2xx responses into adapter errors.
    """

    def __init__(self, api_key: Optional[str], cfg: HttpConfig) -> None:
        """Create a session.

        Args:
            api_key: API key value to place in ``X-API-Key`` headers, or ``None``.
            cfg: Shared timeout and retry settings.
        """
        self.session = requests.Session()
        self.api_key = api_key
        self.cfg = cfg
        self._log = logging.getLogger(__name__)

    def _headers(self, accept: str = "application/json") -> Dict[str, str]:
        headers = {"Accept": accept}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/json",
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a GET request, retrying timeouts up to ``cfg.retries`` times.

        Args:
            url: Absolute endpoint URL.
            params: Optional query parameter mapping.
            accept: ``Accept`` header value.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` from the first attempt that got an answer.

        Raises:
            ApiTimeoutError: If all attempts fail with timeout/connection errors.
            ApiError: For any other ``requests`` failure.
        """
        context = f"GET {url}"
        last_err: ApiTimeoutError | None = None
        attempts = max(self.cfg.retries, 0) + 1
        for attempt in range(attempts):
            try:
                return self.session.get(
                    url,
                    params=params,
                    headers=self._headers(accept=accept),
                    timeout=timeout or self.cfg.request_timeout_s,
                )
            except (req_exc.Timeout, req_exc.ConnectionError):
                self._log.debug("%s attempt %d/%d timed out", context, attempt + 1, attempts)
                last_err = ApiTimeoutError(f"Timeout contacting {url}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise last_err


__all__ = ["HttpConfig", "RetryingSession"]
