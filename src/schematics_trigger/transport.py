"""HTTP plumbing shared by the token exchange and the action dispatch."""

from __future__ import annotations

import ssl
from typing import Any

import certifi
import httpx

from schematics_trigger.config import Settings
from schematics_trigger.exceptions import TransportError


def create_http_client(settings: Settings) -> httpx.Client:
    """Create the client used for both calls of a run.

    Args:
        settings: Provides the per-request timeout. ``None`` waits forever.

    Returns:
        A synchronous httpx client verifying TLS against certifi's bundle.
    """
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    return httpx.Client(timeout=settings.timeout, verify=ssl_context)


def status_line(response: httpx.Response) -> str:
    """Render the status as "<code> <reason>", e.g. "200 OK"."""
    return f"{response.status_code} {response.reason_phrase}".strip()


def send(http: httpx.Client, method: str, url: str, **kwargs: Any) -> httpx.Response:
    """Send a request and read the whole body.

    Raises:
        TransportError: If the request cannot be built, sent, or read.
    """
    try:
        return http.request(method, url, **kwargs)
    except httpx.InvalidURL as e:
        raise TransportError(method, url, f"invalid URL: {e}") from e
    except httpx.RequestError as e:
        raise TransportError(method, url, f"network error: {e}") from e
    except UnicodeEncodeError as e:
        # Non-ASCII header values or unencodable form fields
        raise TransportError(method, url, f"invalid request: {e}") from e
