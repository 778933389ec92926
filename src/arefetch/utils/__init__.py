r"""Utility functions for response normalization, error classification
and URL handling."""

from __future__ import annotations

__all__ = [
    "build_http_error",
    "build_url",
    "classify_exception",
    "is_json_content_type",
    "is_network_exception",
    "is_timeout_exception",
    "parse_response_body",
]

from arefetch.utils.exceptions import (
    classify_exception,
    is_network_exception,
    is_timeout_exception,
)
from arefetch.utils.response import (
    build_http_error,
    is_json_content_type,
    parse_response_body,
)
from arefetch.utils.url import build_url
