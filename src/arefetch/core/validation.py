r"""Parameter validation utilities for the client configuration.

This module provides validation functions for configuration parameters
to ensure they meet the required constraints before being used by the
retry engine.
"""

from __future__ import annotations

__all__ = ["validate_config_params", "validate_retry_status_codes"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_config_params(timeout: int, max_retries: int, retry_delay: int) -> None:
    """Validate numeric configuration parameters.

    Args:
        timeout: Per-attempt timeout in milliseconds. Must be >= 0.
            A value of 0 means no timeout.
        max_retries: Maximum number of retry attempts after the first one.
            Must be >= 0. A value of 0 means no retries.
        retry_delay: Base delay in milliseconds before the first retry.
            Must be >= 0.

    Raises:
        ValueError: If any parameter is negative.

    Example:
        ```pycon
        >>> from arefetch.core.validation import validate_config_params
        >>> validate_config_params(timeout=0, max_retries=3, retry_delay=1000)
        >>> validate_config_params(timeout=0, max_retries=-1, retry_delay=1000)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if timeout < 0:
        msg = f"timeout must be >= 0, got {timeout}"
        raise ValueError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if retry_delay < 0:
        msg = f"retry_delay must be >= 0, got {retry_delay}"
        raise ValueError(msg)


def validate_retry_status_codes(retry_status_codes: Iterable[int]) -> None:
    """Validate the HTTP status codes eligible for retry.

    Args:
        retry_status_codes: The status codes to validate.

    Raises:
        ValueError: If a status code is not an integer in ``[100, 599]``.

    Example:
        ```pycon
        >>> from arefetch.core.validation import validate_retry_status_codes
        >>> validate_retry_status_codes({500, 503})
        >>> validate_retry_status_codes({42})
        Traceback (most recent call last):
        ...
        ValueError: retry status code must be an integer in [100, 599], got 42

        ```
    """
    for code in retry_status_codes:
        if isinstance(code, bool) or not isinstance(code, int) or not 100 <= code <= 599:
            msg = f"retry status code must be an integer in [100, 599], got {code!r}"
            raise ValueError(msg)
