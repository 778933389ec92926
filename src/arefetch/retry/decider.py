r"""Retry decision logic for determining whether to retry requests.

This module provides the RetryDecider class that encapsulates the two
independent retry gates: the retryable status codes for responses and
the network error flag for transport failures. Both share the same
retry budget.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

from arefetch.exceptions import ErrorType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from arefetch.exceptions import FetchError


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        retry_status_codes: The HTTP status codes eligible for retry.
        retry_on_network_error: Whether network errors are retried.

    Example:
        ```pycon
        >>> from arefetch.retry import RetryDecider
        >>> decider = RetryDecider(retry_status_codes={503}, retry_on_network_error=True)
        >>> decider.should_retry_response(503, retries_remaining=1)
        (True, 'status 503')
        >>> decider.should_retry_response(404, retries_remaining=1)
        (False, 'non-retryable status 404')

        ```
    """

    def __init__(self, retry_status_codes: Iterable[int], retry_on_network_error: bool) -> None:
        self.retry_status_codes = frozenset(retry_status_codes)
        self.retry_on_network_error = retry_on_network_error

    def should_retry_response(self, status_code: int, retries_remaining: int) -> tuple[bool, str]:
        """Determine if a non-success response should trigger retry.

        Args:
            status_code: The HTTP status code of the response.
            retries_remaining: The retries still available.

        Returns:
            Tuple of (should_retry, reason).
        """
        if status_code not in self.retry_status_codes:
            return (False, f"non-retryable status {status_code}")
        if retries_remaining <= 0:
            return (False, "max retries exhausted")
        return (True, f"status {status_code}")

    def should_retry_error(self, error: FetchError, retries_remaining: int) -> tuple[bool, str]:
        """Determine if a classified error should trigger retry.

        Only network errors are retried, and only if enabled.

        Args:
            error: The classified error.
            retries_remaining: The retries still available.

        Returns:
            Tuple of (should_retry, reason).
        """
        if error.error_type is not ErrorType.NETWORK_ERROR:
            return (False, f"non-retryable {error.error_type.value}")
        if not self.retry_on_network_error:
            return (False, "network error retries disabled")
        if retries_remaining <= 0:
            return (False, "max retries exhausted")
        return (True, error.error_type.value)
