r"""Asynchronous client for resilient HTTP requests.

This module provides the AsyncFetchClient class, which holds the
default configuration shared by its requests and exposes one coroutine
per HTTP method. Every call resolves its own configuration and runs an
independent retry loop, so concurrent calls through one client do not
interfere.
"""

from __future__ import annotations

__all__ = ["AsyncFetchClient"]

import logging
from typing import TYPE_CHECKING, Any

from arefetch.core.config import ClientConfig, resolve_config
from arefetch.retry.executor import AsyncRetryExecutor
from arefetch.transport import HttpxTransport

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from arefetch.models import FetchResponse
    from arefetch.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)


class AsyncFetchClient:
    r"""Asynchronous client for resilient HTTP requests.

    Args:
        config: Optional ClientConfig instance with the default
            configuration. If ``None``, a default ClientConfig is used.
        transport: Optional transport to send requests with. If
            ``None``, the client creates an ``HttpxTransport`` and closes
            it in ``aclose``. A provided transport is never closed by
            the client.
        **overrides: Configuration fields merged over ``config``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arefetch import AsyncFetchClient
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncFetchClient(
        ...         base_url="https://api.example.com", max_retries=5, timeout=30000
        ...     ) as client:
        ...         response1 = await client.get("/data1")
        ...         response2 = await client.post("/data2", {"key": "value"})
        ...     return response1.data, response2.status
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```

    Note:
        All HTTP method calls accept configuration fields as keyword
        arguments, allowing per-request override of the client's
        default configuration.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        **overrides: Any,
    ) -> None:
        config = config if config is not None else ClientConfig()
        self._config = config.merge(**overrides)
        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpxTransport()
        self._closed = False
        self._parent: AsyncFetchClient | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self._config})"

    @property
    def config(self) -> ClientConfig:
        """The default configuration of the client."""
        return self._config

    @property
    def transport(self) -> Transport:
        """The transport used to send the requests."""
        return self._transport

    @property
    def is_closed(self) -> bool:
        """Indicate if the client, or the client it was created from, is
        closed."""
        return self._closed or (self._parent is not None and self._parent.is_closed)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        r"""Close the transport if the client created it."""
        if self._owns_transport:
            await self._transport.aclose()
        self._closed = True

    def create(self, **overrides: Any) -> AsyncFetchClient:
        r"""Create a new client that extends the defaults of this one.

        The new client shares the transport of this client but does
        not own it.

        Args:
            **overrides: Configuration fields merged over the defaults
                of this client.

        Returns:
            The new client.

        Example:
            ```pycon
            >>> from arefetch import AsyncFetchClient
            >>> client = AsyncFetchClient(headers={"X-Team": "core"})
            >>> child = client.create(base_url="https://api.example.com")
            >>> child.config.base_url
            'https://api.example.com'
            >>> child.config.headers["X-Team"]
            'core'

            ```
        """
        client = AsyncFetchClient(config=self._config.merge(**overrides), transport=self._transport)
        client._parent = self
        return client

    async def request(
        self,
        method: str,
        url: str,
        *,
        data: Any = None,
        **overrides: Any,
    ) -> FetchResponse:
        r"""Send an HTTP request with automatic retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS, etc.).
            url: The URL to send the request to.
            data: The request body. Ignored for GET and HEAD.
            **overrides: Configuration fields overriding the client's
                defaults for this request.

        Returns:
            The normalized response.

        Raises:
            FetchError: If the request fails. See ``AsyncRetryExecutor``.
            RuntimeError: If the client is closed.
        """
        if self.is_closed:
            msg = f"{self.__class__.__qualname__} is closed and cannot send requests"
            raise RuntimeError(msg)
        config = resolve_config(self._config, overrides)
        executor = AsyncRetryExecutor(config, self._transport)
        return await executor.execute(method, url, body=data)

    async def get(self, url: str, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP GET request with automatic retry logic.

        Args:
            url: The URL to send the GET request to.
            **overrides: Configuration overrides (see request() method).

        Returns:
            The normalized response.
        """
        return await self.request("GET", url, **overrides)

    async def head(self, url: str, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP HEAD request with automatic retry logic."""
        return await self.request("HEAD", url, **overrides)

    async def options(self, url: str, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP OPTIONS request with automatic retry logic."""
        return await self.request("OPTIONS", url, **overrides)

    async def post(self, url: str, data: Any = None, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP POST request with automatic retry logic.

        Args:
            url: The URL to send the POST request to.
            data: The request body. JSON encoded unless it is text,
                bytes or a ``MultipartForm``.
            **overrides: Configuration overrides (see request() method).

        Returns:
            The normalized response.
        """
        return await self.request("POST", url, data=data, **overrides)

    async def put(self, url: str, data: Any = None, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP PUT request with automatic retry logic."""
        return await self.request("PUT", url, data=data, **overrides)

    async def patch(self, url: str, data: Any = None, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP PATCH request with automatic retry logic."""
        return await self.request("PATCH", url, data=data, **overrides)

    async def delete(self, url: str, data: Any = None, **overrides: Any) -> FetchResponse:
        r"""Send an HTTP DELETE request with automatic retry logic.

        Unlike GET and HEAD, a DELETE request may carry a body.

        Args:
            url: The URL to send the DELETE request to.
            data: Optional request body.
            **overrides: Configuration overrides (see request() method).

        Returns:
            The normalized response.
        """
        return await self.request("DELETE", url, data=data, **overrides)
