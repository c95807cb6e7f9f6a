"""Tests for the shared HTTP helpers."""

from __future__ import annotations

import httpx
import pytest

from schematics_trigger.config import Settings
from schematics_trigger.exceptions import TransportError
from schematics_trigger.transport import create_http_client, send, status_line


def test_create_http_client_timeout() -> None:
    with create_http_client(Settings(timeout=12.5)) as http:
        assert http.timeout == httpx.Timeout(12.5)


def test_create_http_client_unbounded() -> None:
    with create_http_client(Settings(timeout=None)) as http:
        assert http.timeout == httpx.Timeout(None)


def test_status_line() -> None:
    assert status_line(httpx.Response(200)) == "200 OK"
    assert status_line(httpx.Response(404)) == "404 Not Found"


def test_send_returns_response() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="fine"))
    with httpx.Client(transport=transport) as http:
        response = send(http, "GET", "https://example.test/")
    assert response.text == "fine"


def test_send_wraps_request_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.RemoteProtocolError("server hung up", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(TransportError) as exc_info:
            send(http, "PUT", "https://example.test/x")

    assert exc_info.value.method == "PUT"
    assert exc_info.value.url == "https://example.test/x"
    assert "server hung up" in str(exc_info.value)


def test_send_wraps_header_encoding_errors() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    with httpx.Client(transport=transport) as http:
        with pytest.raises(TransportError) as exc_info:
            send(http, "PUT", "https://example.test/x", headers={"Authorization": "tök"})

    assert "invalid request" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
