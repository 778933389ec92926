r"""Core configuration and validation for the fetch client."""

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
    "validate_config_params",
    "validate_retry_status_codes",
]

from arefetch.core.config import (
    DEFAULT_HEADERS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    RETRY_STATUS_CODES,
    ClientConfig,
    merge_headers,
    resolve_config,
)
from arefetch.core.validation import validate_config_params, validate_retry_status_codes
