r"""Exception classification utilities.

This module maps the exceptions raised while sending a request to the
closed set of classified errors defined in ``arefetch.exceptions``.
"""

from __future__ import annotations

__all__ = ["classify_exception", "is_network_exception", "is_timeout_exception"]

import asyncio
import logging

import httpx

from arefetch.exceptions import (
    FetchError,
    NetworkError,
    RequestTimeoutError,
    UnknownRequestError,
)

logger: logging.Logger = logging.getLogger(__name__)


def is_timeout_exception(exc: BaseException) -> bool:
    r"""Indicate if an exception signals an exceeded time budget.

    Args:
        exc: The exception to check.

    Returns:
        ``True`` for the per-attempt cancellation timeout and for
            ``httpx`` timeouts, otherwise ``False``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arefetch.utils.exceptions import is_timeout_exception
        >>> is_timeout_exception(asyncio.TimeoutError())
        True
        >>> is_timeout_exception(ValueError())
        False

        ```
    """
    return isinstance(exc, (asyncio.TimeoutError, TimeoutError, httpx.TimeoutException))


def is_network_exception(exc: BaseException) -> bool:
    r"""Indicate if an exception is a connectivity failure.

    Args:
        exc: The exception to check.

    Returns:
        ``True`` for ``httpx`` transport errors and OS-level connection
            errors, otherwise ``False``.

    Example:
        ```pycon
        >>> import httpx
        >>> from arefetch.utils.exceptions import is_network_exception
        >>> is_network_exception(httpx.ConnectError("connection refused"))
        True
        >>> is_network_exception(KeyError("key"))
        False

        ```
    """
    return isinstance(exc, (httpx.TransportError, OSError))


def classify_exception(
    exc: BaseException,
    *,
    url: str,
    method: str,
    timeout: int,
) -> FetchError:
    r"""Classify an exception raised during one attempt.

    The rules are applied in order:

    1. An already classified ``FetchError`` is returned unchanged.
    2. A timeout becomes a ``RequestTimeoutError``.
    3. A connectivity failure becomes a ``NetworkError``.
    4. Anything else becomes an ``UnknownRequestError``.

    Timeouts are checked before connectivity failures because
    ``httpx.TimeoutException`` is itself a transport error.

    Args:
        exc: The exception to classify.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.
        timeout: The configured per-attempt timeout in milliseconds.

    Returns:
        The classified error. The original exception is attached as
            its cause.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arefetch.utils.exceptions import classify_exception
        >>> error = classify_exception(
        ...     asyncio.TimeoutError(), url="https://example.com", method="GET", timeout=100
        ... )
        >>> error.error_type.value
        'TIMEOUT_ERROR'
        >>> error.message
        'GET request to https://example.com timed out after 100ms'

        ```
    """
    if isinstance(exc, FetchError):
        return exc
    if is_timeout_exception(exc):
        message = (
            f"{method} request to {url} timed out after {timeout}ms"
            if timeout > 0
            else f"{method} request to {url} timed out: {exc}"
        )
        return RequestTimeoutError(
            method=method,
            url=url,
            message=message,
            timeout=timeout,
            cause=exc,
        )
    if is_network_exception(exc):
        return NetworkError(
            method=method,
            url=url,
            message=f"{method} request to {url} failed with a network error: {exc}",
            cause=exc,
        )
    logger.debug(f"{method} request to {url} raised an unexpected {type(exc).__name__}: {exc}")
    return UnknownRequestError(
        method=method,
        url=url,
        message=f"{method} request to {url} failed with an unexpected error: {exc}",
        cause=exc,
    )
