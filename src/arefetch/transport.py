r"""Transport abstraction used by the retry engine.

The engine treats the transport as an opaque capability: given the
options of one attempt, it returns a response or raises. Socket I/O,
TLS, DNS, redirects and connection pooling are all delegated to it.
``HttpxTransport`` is the default implementation over
``httpx.AsyncClient``.
"""

from __future__ import annotations

__all__ = ["HttpxTransport", "Transport"]

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

from arefetch.models import MultipartForm

if TYPE_CHECKING:
    from arefetch.models import RequestOptions

logger: logging.Logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Protocol of the object that sends requests over the network.

    ``send`` must be cancellable: the engine cancels it when the
    per-attempt timeout fires.
    """

    async def send(self, options: RequestOptions) -> httpx.Response:
        """Send one request and return its response, whatever the
        status code."""

    async def aclose(self) -> None:
        """Release the resources held by the transport."""


class HttpxTransport:
    r"""Transport implementation based on ``httpx.AsyncClient``.

    The underlying client is created on first use. An externally
    provided client is used as is and is never closed by the transport.

    Args:
        client: Optional ``httpx.AsyncClient`` to send requests with.
        **client_kwargs: Keyword arguments passed to ``httpx.AsyncClient``
            when the transport creates its own client. They are ignored
            if ``client`` is provided. The created client has no timeout
            and follows redirects unless told otherwise.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arefetch.models import RequestOptions
        >>> from arefetch.transport import HttpxTransport
        >>> async def main():  # doctest: +SKIP
        ...     transport = HttpxTransport()
        ...     try:
        ...         return await transport.send(RequestOptions("GET", "https://example.com"))
        ...     finally:
        ...         await transport.aclose()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, client: httpx.AsyncClient | None = None, **client_kwargs: Any) -> None:
        self._client = client
        self._owns_client = client is None
        # Per-attempt timeouts are enforced by the engine
        client_kwargs.setdefault("timeout", None)
        client_kwargs.setdefault("follow_redirects", True)
        self._client_kwargs = client_kwargs
        self._closed = False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(owns_client={self._owns_client})"

    @property
    def is_closed(self) -> bool:
        """Indicate if the transport has been closed."""
        return self._closed

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the client is available for use.

        Returns:
            The httpx.AsyncClient instance.

        Raises:
            RuntimeError: If the transport is already closed.
        """
        if self._closed:
            msg = "HttpxTransport is closed and cannot send requests"
            raise RuntimeError(msg)
        if self._client is None:
            self._client = httpx.AsyncClient(**self._client_kwargs)
        return self._client

    async def send(self, options: RequestOptions) -> httpx.Response:
        r"""Send one request.

        Args:
            options: The options of the request.

        Returns:
            The response, whatever its status code.

        Raises:
            RuntimeError: If the transport is already closed.
            httpx.TransportError: If the request cannot be completed.
        """
        client = self._ensure_client()
        kwargs: dict[str, Any] = {"headers": dict(options.headers)}
        body = options.body
        if isinstance(body, MultipartForm):
            kwargs["data"] = dict(body.data)
            kwargs["files"] = dict(body.files)
            # httpx must generate the multipart boundary itself
            kwargs["headers"] = {
                name: value
                for name, value in kwargs["headers"].items()
                if name.lower() != "content-type"
            }
        elif body is not None:
            kwargs["content"] = body
        logger.debug(f"Sending {options.method} request to {options.url}")
        return await client.request(options.method, options.url, **kwargs)

    async def aclose(self) -> None:
        r"""Close the underlying client if the transport created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
        self._client = None
        self._closed = True
