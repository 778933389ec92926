r"""Module-level coroutines for one-off HTTP requests.

Each coroutine creates a throwaway ``AsyncFetchClient``, sends one
request with automatic retry logic and closes the client. Use an
``AsyncFetchClient`` directly to share connections between requests.
"""

from __future__ import annotations

__all__ = ["delete", "get", "head", "options", "patch", "post", "put", "request"]

from typing import TYPE_CHECKING, Any

from arefetch.client import AsyncFetchClient

if TYPE_CHECKING:
    from arefetch.core.config import ClientConfig
    from arefetch.models import FetchResponse
    from arefetch.transport import Transport


async def request(
    method: str,
    url: str,
    *,
    data: Any = None,
    config: ClientConfig | None = None,
    transport: Transport | None = None,
    **overrides: Any,
) -> FetchResponse:
    r"""Send an HTTP request with automatic retry logic.

    Args:
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL to send the request to.
        data: The request body. Ignored for GET and HEAD.
        config: Optional base configuration.
        transport: Optional transport. It is not closed afterwards.
        **overrides: Configuration fields merged over ``config``.

    Returns:
        The normalized response.

    Raises:
        FetchError: If the request fails.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arefetch import request
        >>> response = asyncio.run(
        ...     request("GET", "https://api.example.com/data", max_retries=5)
        ... )  # doctest: +SKIP

        ```
    """
    async with AsyncFetchClient(config=config, transport=transport, **overrides) as client:
        return await client.request(method, url, data=data)


async def get(url: str, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP GET request with automatic retry logic.

    Args:
        url: The URL to send the GET request to.
        **kwargs: Additional keyword arguments (see request()).

    Returns:
        The normalized response.
    """
    return await request("GET", url, **kwargs)


async def head(url: str, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP HEAD request with automatic retry logic."""
    return await request("HEAD", url, **kwargs)


async def options(url: str, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP OPTIONS request with automatic retry logic."""
    return await request("OPTIONS", url, **kwargs)


async def post(url: str, data: Any = None, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP POST request with automatic retry logic.

    Args:
        url: The URL to send the POST request to.
        data: The request body.
        **kwargs: Additional keyword arguments (see request()).

    Returns:
        The normalized response.
    """
    return await request("POST", url, data=data, **kwargs)


async def put(url: str, data: Any = None, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP PUT request with automatic retry logic."""
    return await request("PUT", url, data=data, **kwargs)


async def patch(url: str, data: Any = None, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP PATCH request with automatic retry logic."""
    return await request("PATCH", url, data=data, **kwargs)


async def delete(url: str, data: Any = None, **kwargs: Any) -> FetchResponse:
    r"""Send an HTTP DELETE request with automatic retry logic."""
    return await request("DELETE", url, data=data, **kwargs)
