from __future__ import annotations

from userdir.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from userdir.domain.ports import UseCaseError
from userdir.usecases.error_mapping import map_api_error


def test_timeout_maps_to_request_timeout() -> None:
    err = map_api_error(ApiTimeoutError("t", context="GET x"), default_code="FETCH_FAILED")
    assert err.code == "REQUEST_TIMEOUT"
    assert err.message == "Request timed out. Check connection."


def test_client_errors_map_by_status() -> None:
    assert map_api_error(ApiClientError("x", status=401), default_code="D").code == "AUTH_FAILED"
    not_found = map_api_error(ApiClientError("x", status=404, hint="no /users here"), default_code="D")
    assert not_found.code == "NOT_FOUND"
    assert not_found.message == "User list not found: no /users here"
    other = map_api_error(ApiClientError("x", status=429), default_code="D")
    assert other.code == "REQUEST_FAILED"
    assert other.message == "Request failed (HTTP 429)."


def test_server_and_generic_api_errors() -> None:
    assert map_api_error(ApiServerError("x", status=500), default_code="D").code == "SERVER_ERROR"
    generic = map_api_error(ApiError("users: expected list response"), default_code="D")
    assert generic.code == "API_ERROR"
    assert generic.message == "users: expected list response"


def test_use_case_errors_pass_through_and_others_use_default() -> None:
    original = UseCaseError("INVALID_PAYLOAD", "bad")
    assert map_api_error(original, default_code="D") is original

    fallback = map_api_error(RuntimeError(""), default_code="FETCH_FAILED", default_message="Failed to fetch users.")
    assert fallback.code == "FETCH_FAILED"
    assert fallback.message == "Failed to fetch users."
