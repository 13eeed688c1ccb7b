"""Regression tests for status endpoint adapter error mapping."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from app.adapters import (
    StatusApiConnectionError,
    StatusApiHttpError,
    StatusApiResponseError,
    StatusApiTimeoutError,
)
from app.adapters.status_api import StatusApiAdapter
import app.adapters.status_api as status_api_module


def _install_transport(
    monkeypatch: pytest.MonkeyPatch,
    handler: Callable[[httpx.Request], httpx.Response],
) -> list[httpx.Request]:
    """Route adapter clients through an in-memory transport.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        handler: Request handler producing canned responses.

    Returns:
        list[httpx.Request]: Requests observed by the transport.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    observed_requests: list[httpx.Request] = []
    original_client = httpx.Client

    def _recording_handler(request: httpx.Request) -> httpx.Response:
        observed_requests.append(request)
        return handler(request)

    def _client_factory(*args: object, **kwargs: object) -> httpx.Client:
        return original_client(*args, transport=httpx.MockTransport(_recording_handler), **kwargs)

    monkeypatch.setattr(status_api_module.httpx, "Client", _client_factory)
    return observed_requests


def test_adapters_status_api_returns_decoded_object(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return the decoded JSON object from a single GET.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate decode behavior.

    Raises:
        AssertionError: Raised when payload or request shape is incorrect.
    """

    payload = {"status": "ok", "service": "svc", "timestamp": "2024-01-01T00:00:00.000Z"}
    observed_requests = _install_transport(monkeypatch, lambda request: httpx.Response(200, json=payload))

    result = StatusApiAdapter().adapter_fetch_status("http://status.test/status")

    assert result == payload
    assert len(observed_requests) == 1
    assert observed_requests[0].method == "GET"
    assert str(observed_requests[0].url) == "http://status.test/status"


def test_adapters_status_api_non_success_status_raises_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise StatusApiHttpError naming the status code, without retrying.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when mapping or retry behavior is incorrect.
    """

    observed_requests = _install_transport(monkeypatch, lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(StatusApiHttpError, match="API request failed with status: 500") as error_info:
        StatusApiAdapter().adapter_fetch_status("http://status.test/status")

    assert error_info.value.status_code == 500
    assert len(observed_requests) == 1


def test_adapters_status_api_invalid_json_raises_response_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise StatusApiResponseError when body is not JSON."""

    _install_transport(monkeypatch, lambda request: httpx.Response(200, text="<html></html>"))

    with pytest.raises(StatusApiResponseError, match="not valid JSON"):
        StatusApiAdapter().adapter_fetch_status("http://status.test/status")


def test_adapters_status_api_non_object_json_raises_response_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise StatusApiResponseError when body is a JSON array."""

    _install_transport(monkeypatch, lambda request: httpx.Response(200, json=["ok"]))

    with pytest.raises(StatusApiResponseError, match="JSON object"):
        StatusApiAdapter().adapter_fetch_status("http://status.test/status")


def test_adapters_status_api_timeout_raises_timeout_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Map transport timeouts onto StatusApiTimeoutError.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate timeout mapping.

    Raises:
        AssertionError: Raised when timeout mapping is incorrect.
    """

    def _raise_timeout(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    _install_transport(monkeypatch, _raise_timeout)

    with pytest.raises(StatusApiTimeoutError, match="timed out"):
        StatusApiAdapter().adapter_fetch_status("http://status.test/status")


def test_adapters_status_api_connect_failure_raises_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Map unreachable hosts onto StatusApiConnectionError."""

    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _install_transport(monkeypatch, _refuse)

    with pytest.raises(StatusApiConnectionError, match="connection refused"):
        StatusApiAdapter().adapter_fetch_status("http://status.test/status")


def test_adapters_status_api_rejects_invalid_arguments() -> None:
    """Reject blank URLs and non-positive timeouts before any request."""

    with pytest.raises(ValueError, match="request_timeout_seconds"):
        StatusApiAdapter(request_timeout_seconds=0)
    with pytest.raises(ValueError, match="url must not be blank"):
        StatusApiAdapter().adapter_fetch_status("   ")


def test_adapters_status_api_malformed_url_raises_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Map an unparseable URL onto StatusApiConnectionError without sending a request.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate URL error mapping.

    Raises:
        AssertionError: Raised when the URL error escapes the adapter hierarchy.
    """

    observed_requests = _install_transport(monkeypatch, lambda request: httpx.Response(200, json={}))

    with pytest.raises(StatusApiConnectionError, match="invalid URL"):
        StatusApiAdapter().adapter_fetch_status("http://[::1/status")

    assert observed_requests == []
