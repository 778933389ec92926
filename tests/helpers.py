r"""Shared test helpers for the retry engine and client tests."""

from __future__ import annotations

__all__ = [
    "HTTPBIN_URL",
    "HTTP_METHODS",
    "TEST_URL",
    "HttpMethodTestCase",
    "create_mock_transport",
    "create_response",
    "sent_options",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from arefetch.transport import HttpxTransport

if TYPE_CHECKING:
    from arefetch.models import RequestOptions

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"

TEST_URL = "https://api.example.com/data"


def create_response(
    status_code: int = 200,
    *,
    json: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Create a real httpx.Response for testing.

    Args:
        status_code: The HTTP status code.
        json: Optional JSON body.
        text: Optional text body. Ignored if ``json`` is provided.
        headers: Optional response headers.

    Returns:
        The response.
    """
    if json is not None:
        return httpx.Response(status_code, json=json, headers=headers)
    return httpx.Response(status_code, text=text or "", headers=headers)


def create_mock_transport(*results: httpx.Response | Exception) -> Mock:
    """Create a mock transport whose ``send`` returns or raises each
    result in turn.

    Args:
        *results: The responses to return or exceptions to raise.

    Returns:
        The mock transport.
    """
    return Mock(spec=HttpxTransport, send=AsyncMock(side_effect=list(results)), aclose=AsyncMock())


def sent_options(transport: Mock) -> list[RequestOptions]:
    """Return the request options sent through a mock transport."""
    return [call.args[0] for call in transport.send.call_args_list]


@dataclass
class HttpMethodTestCase:
    """Test case definition for HTTP method testing.

    Attributes:
        method_name: The HTTP method name (e.g., "GET", "POST").
        client_method: The AsyncFetchClient method name (e.g., "get", "post").
        supports_body: Whether the client method accepts a body.
        sends_body: Whether the body reaches the transport.
    """

    method_name: str
    client_method: str
    supports_body: bool
    sends_body: bool


HTTP_METHODS = [
    pytest.param(HttpMethodTestCase("GET", "get", False, False), id="GET"),
    pytest.param(HttpMethodTestCase("HEAD", "head", False, False), id="HEAD"),
    pytest.param(HttpMethodTestCase("OPTIONS", "options", False, False), id="OPTIONS"),
    pytest.param(HttpMethodTestCase("POST", "post", True, True), id="POST"),
    pytest.param(HttpMethodTestCase("PUT", "put", True, True), id="PUT"),
    pytest.param(HttpMethodTestCase("PATCH", "patch", True, True), id="PATCH"),
    pytest.param(HttpMethodTestCase("DELETE", "delete", True, True), id="DELETE"),
]
