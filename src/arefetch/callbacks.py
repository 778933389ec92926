r"""Callback types for observing retries.

Retry decisions never surface to the caller. The ``on_retry`` hook is
the side channel that lets operators observe them, for example to log
or count retry storms, without affecting control flow.

Example:
    ```pycon
    >>> from arefetch import AsyncFetchClient
    >>> from arefetch.callbacks import RetryInfo
    >>> def log_retry(retry_info: RetryInfo):
    ...     print(f"Retry {retry_info.url}: {retry_info.retries_remaining} left")
    ...
    >>> client = AsyncFetchClient(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = ["RetryInfo", "invoke_on_retry"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from arefetch.exceptions import FetchError


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The number of the upcoming attempt (1-indexed). The
            first retry is attempt 2.
        retries_remaining: The retries left before this one is consumed.
        wait_time: The delay in milliseconds before the upcoming attempt.
        error: The classified error that triggered the retry.
        status_code: The HTTP status code that triggered the retry (if any).
    """

    url: str
    method: str
    attempt: int
    retries_remaining: int
    wait_time: float
    error: FetchError
    status_code: int | None


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    retries_remaining: int,
    wait_time: float,
    error: FetchError,
    status_code: int | None,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each retry.
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The attempt that just failed (0-indexed internally). The
            callback receives the upcoming attempt as a 1-indexed value
            (attempt + 2).
        retries_remaining: The retries left before this one is consumed.
        wait_time: The delay in milliseconds before the upcoming attempt.
        error: The classified error that triggered the retry.
        status_code: The HTTP status code that triggered the retry (if any).
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                method=method,
                attempt=attempt + 2,
                retries_remaining=retries_remaining,
                wait_time=wait_time,
                error=error,
                status_code=status_code,
            )
        )
