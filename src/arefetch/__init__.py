r"""arefetch - Resilient asynchronous HTTP client with automatic retries.

This package provides a thin convenience layer over ``httpx`` that adds
configurable automatic retries, per-attempt timeouts and structured
error classification.

Key Features:
    - Automatic retry on transient HTTP errors (500, 502, 503, 504)
    - Optional retry on network errors
    - Exponential or constant backoff between retries
    - Per-attempt timeout in milliseconds
    - Response bodies parsed as JSON or text based on the content type
    - Classified errors: network, HTTP, timeout and unknown errors
    - Retry observer callback for logging and metrics
    - Complete HTTP method support (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS)

Example:
    ```pycon
    >>> import asyncio
    >>> from arefetch import AsyncFetchClient, FetchError
    >>> async def main():  # doctest: +SKIP
    ...     async with AsyncFetchClient(base_url="https://api.example.com", timeout=5000) as client:
    ...         try:
    ...             response = await client.get("/data")
    ...         except FetchError as exc:
    ...             print(exc.error_type, exc.message)
    ...         else:
    ...             print(response.status, response.data)
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncFetchClient",
    "ClientConfig",
    "ErrorType",
    "FetchError",
    "FetchResponse",
    "HttpStatusError",
    "HttpxTransport",
    "MaxRetriesExhaustedError",
    "MultipartForm",
    "NetworkError",
    "RequestTimeoutError",
    "Transport",
    "UnknownRequestError",
    "__version__",
    "delete",
    "get",
    "head",
    "options",
    "patch",
    "post",
    "put",
    "request",
]

from importlib.metadata import PackageNotFoundError, version

from arefetch.client import AsyncFetchClient
from arefetch.core.config import ClientConfig
from arefetch.exceptions import (
    ErrorType,
    FetchError,
    HttpStatusError,
    MaxRetriesExhaustedError,
    NetworkError,
    RequestTimeoutError,
    UnknownRequestError,
)
from arefetch.models import FetchResponse, MultipartForm
from arefetch.request import delete, get, head, options, patch, post, put, request
from arefetch.transport import HttpxTransport, Transport

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
