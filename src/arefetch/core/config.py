r"""Configuration dataclass and defaults for the fetch client.

This module provides configuration constants and a dataclass-based
configuration object shared by ``AsyncFetchClient`` and the retry
engine, together with the resolver that merges per-call overrides over
instance defaults.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_HEADERS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
    "ClientConfig",
    "merge_headers",
    "resolve_config",
]

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from arefetch.core.validation import validate_config_params, validate_retry_status_codes

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from arefetch.callbacks import RetryInfo


# Headers sent with every request unless overridden
DEFAULT_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Per-attempt timeout in milliseconds, 0 disables the timeout
DEFAULT_TIMEOUT = 0

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Delay in milliseconds before the first retry
# With exponential backoff: 1st retry waits 1000ms, 2nd waits 2000ms, 3rd waits 4000ms
DEFAULT_RETRY_DELAY = 1000

# HTTP status codes that should trigger automatic retry
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = frozenset({500, 502, 503, 504})


def merge_headers(
    defaults: Mapping[str, str], overrides: Mapping[str, str] | None
) -> dict[str, str]:
    """Merge two header mappings, the override winning on collision.

    Header names are compared case-insensitively, so an override of
    ``content-type`` replaces a default ``Content-Type``. Default keys
    that are not overridden survive unchanged.

    Args:
        defaults: The default headers.
        overrides: The headers to merge over the defaults.

    Returns:
        A new dictionary with the merged headers.

    Example:
        ```pycon
        >>> from arefetch.core.config import merge_headers
        >>> merge_headers({"A": "1"}, {"B": "2"})
        {'A': '1', 'B': '2'}
        >>> merge_headers({"A": "1"}, {"A": "2"})
        {'A': '2'}
        >>> merge_headers({"Accept": "text/html"}, {"accept": "*/*"})
        {'accept': '*/*'}

        ```
    """
    merged = dict(defaults)
    for name, value in (overrides or {}).items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for request and retry behavior.

    The configuration is immutable. ``merge`` produces a new value for
    each call so the instance defaults of a client are never modified.

    Args:
        base_url: Prefix prepended to every request URL. An empty
            string means no prefix. The concatenation is literal.
        headers: Headers sent with every request.
        timeout: Per-attempt timeout in milliseconds. Must be >= 0.
            ``0`` means no timeout.
        max_retries: Number of retry attempts after the first one.
            Must be >= 0.
        retry_delay: Delay in milliseconds before the first retry.
            Must be >= 0.
        exponential_backoff: If ``True``, the delay doubles after each
            retry. The growth is not capped.
        retry_status_codes: HTTP status codes eligible for retry.
        retry_on_network_error: Whether connectivity failures are
            retried.
        on_retry: Optional callback called before each retry delay.

    Example:
        ```pycon
        >>> from arefetch.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.max_retries
        3
        >>> merged = config.merge(max_retries=5, headers={"X-Trace": "abc"})
        >>> merged.max_retries
        5
        >>> merged.headers["X-Trace"]
        'abc'
        >>> config.max_retries  # Original unchanged
        3

        ```
    """

    base_url: str = ""
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout: int = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: int = DEFAULT_RETRY_DELAY
    exponential_backoff: bool = True
    retry_status_codes: Iterable[int] = RETRY_STATUS_CODES
    retry_on_network_error: bool = True
    on_retry: Callable[[RetryInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate and normalize configuration parameters.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_config_params(
            timeout=self.timeout,
            max_retries=self.max_retries,
            retry_delay=self.retry_delay,
        )
        retry_status_codes = frozenset(self.retry_status_codes)
        validate_retry_status_codes(retry_status_codes)
        object.__setattr__(self, "headers", dict(self.headers))
        object.__setattr__(self, "retry_status_codes", retry_status_codes)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with the given parameters overridden.

        Top-level fields are replaced by the override. ``headers`` is
        merged key by key. ``None`` values are ignored so callers can
        forward optional arguments unchanged.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Raises:
            TypeError: If an override does not name a config field.
            ValueError: If the merged values fail validation.

        Example:
            ```pycon
            >>> from arefetch.core.config import ClientConfig
            >>> config = ClientConfig(headers={"A": "1"})
            >>> config.merge(headers={"B": "2"}).headers
            {'A': '1', 'B': '2'}

            ```
        """
        filtered = {key: value for key, value in overrides.items() if value is not None}
        if not filtered:
            return self
        if "headers" in filtered:
            filtered["headers"] = merge_headers(self.headers, filtered["headers"])
        return replace(self, **filtered)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to dictionary format.

        Returns:
            Dictionary with one entry per configuration field.

        Example:
            ```pycon
            >>> from arefetch.core.config import ClientConfig
            >>> ClientConfig(max_retries=5).to_dict()["max_retries"]
            5

            ```
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


def resolve_config(defaults: ClientConfig, overrides: Mapping[str, Any]) -> ClientConfig:
    """Resolve the effective configuration of a single call.

    Args:
        defaults: The instance-level defaults.
        overrides: The per-call overrides.

    Returns:
        The merged configuration. ``defaults`` is returned as is when
        there is nothing to override.

    Example:
        ```pycon
        >>> from arefetch.core.config import ClientConfig, resolve_config
        >>> defaults = ClientConfig()
        >>> resolve_config(defaults, {}) == defaults
        True
        >>> resolve_config(defaults, {"timeout": 100}).timeout
        100

        ```
    """
    return defaults.merge(**overrides)
