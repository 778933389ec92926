r"""HTTP response handling utilities.

This module provides functions for normalizing the body of HTTP
responses and for turning non-success responses into classified errors.
"""

from __future__ import annotations

__all__ = ["build_http_error", "is_json_content_type", "parse_response_body"]

import logging
from typing import TYPE_CHECKING, Any

from arefetch.exceptions import HttpStatusError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def is_json_content_type(content_type: str | None) -> bool:
    r"""Indicate if a content type denotes JSON data.

    Args:
        content_type: The value of the ``Content-Type`` header.

    Returns:
        ``True`` for ``application/json`` and ``+json`` media types,
            otherwise ``False``.

    Example:
        ```pycon
        >>> from arefetch.utils.response import is_json_content_type
        >>> is_json_content_type("application/json; charset=utf-8")
        True
        >>> is_json_content_type("application/problem+json")
        True
        >>> is_json_content_type("text/html")
        False
        >>> is_json_content_type(None)
        False

        ```
    """
    if not content_type:
        return False
    media_type = content_type.split(";", maxsplit=1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def parse_response_body(response: httpx.Response) -> Any:
    r"""Parse the body of a response based on its content type.

    JSON content is decoded. If decoding fails, the raw text is returned
    instead of raising. Any other content type is returned as text.

    Args:
        response: The HTTP response.

    Returns:
        The decoded JSON value or the body text.

    Example:
        ```pycon
        >>> import httpx
        >>> from arefetch.utils.response import parse_response_body
        >>> parse_response_body(httpx.Response(200, json={"key": "value"}))
        {'key': 'value'}
        >>> parse_response_body(
        ...     httpx.Response(200, text="{oops", headers={"Content-Type": "application/json"})
        ... )
        '{oops'

        ```
    """
    if is_json_content_type(response.headers.get("content-type")):
        try:
            return response.json()
        except ValueError:
            logger.debug(
                f"Failed to decode JSON body (status {response.status_code}), "
                "falling back to text"
            )
    return response.text


def build_http_error(
    response: httpx.Response,
    data: Any,
    url: str,
    method: str,
) -> HttpStatusError:
    r"""Create the error of a response with a non-success status code.

    Args:
        response: The HTTP response.
        data: The parsed body of the response.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.

    Returns:
        The classified HTTP error.

    Example:
        ```pycon
        >>> import httpx
        >>> from arefetch.utils.response import build_http_error
        >>> error = build_http_error(
        ...     httpx.Response(404), data="", url="https://example.com", method="GET"
        ... )
        >>> error.message
        'GET request to https://example.com failed with status 404'

        ```
    """
    return HttpStatusError(
        method=method,
        url=url,
        message=f"{method} request to {url} failed with status {response.status_code}",
        status=response.status_code,
        data=data,
        response=response,
    )
