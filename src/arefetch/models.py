r"""Value types exchanged between the client, the engine and the
transport."""

from __future__ import annotations

__all__ = [
    "BODYLESS_METHODS",
    "FetchResponse",
    "MultipartForm",
    "RequestOptions",
    "prepare_request_options",
]

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

# Methods that never carry a request body
BODYLESS_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True)
class MultipartForm:
    """Binary multipart form payload.

    A ``MultipartForm`` body is sent as is, without JSON encoding.

    Attributes:
        data: The non-file form fields.
        files: The file fields, in any format accepted by ``httpx``.
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    files: Mapping[str, Any] = field(default_factory=dict)


Body = Union[str, bytes, MultipartForm]


@dataclass(frozen=True)
class RequestOptions:
    """Description of a single request as handed to the transport.

    Attributes:
        method: The upper-case HTTP method.
        url: The resolved URL.
        headers: The merged request headers.
        body: The encoded body, or ``None`` if the request has no body.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Body | None = None


@dataclass(frozen=True)
class FetchResponse:
    """Normalized result of a successful request.

    Attributes:
        data: The parsed body. Decoded JSON for JSON content types,
            text otherwise.
        status: The HTTP status code.
        status_text: The HTTP reason phrase.
        headers: The response headers.
        request: The options of the attempt that succeeded.
        raw_response: The raw transport response.
    """

    data: Any
    status: int
    status_text: str
    headers: httpx.Headers
    request: RequestOptions
    raw_response: httpx.Response

    @property
    def ok(self) -> bool:
        """Indicate if the status code is in the success range."""
        return 200 <= self.status <= 299


def encode_body(body: Any) -> Body | None:
    r"""Encode a request body for transmission.

    Text, bytes and ``MultipartForm`` payloads are returned unchanged.
    Any other value is serialized to JSON text.

    Args:
        body: The body to encode. ``None`` means no body.

    Returns:
        The encoded body.

    Example:
        ```pycon
        >>> from arefetch.models import encode_body
        >>> encode_body({"key": "value"})
        '{"key": "value"}'
        >>> encode_body("raw text")
        'raw text'

        ```
    """
    if body is None or isinstance(body, (str, bytes, MultipartForm)):
        return body
    return json.dumps(body)


def prepare_request_options(
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Any = None,
) -> RequestOptions:
    r"""Build the options of one attempt.

    The body of ``GET`` and ``HEAD`` requests is always dropped.

    Args:
        method: The HTTP method.
        url: The resolved URL.
        headers: The merged request headers.
        body: The request body, encoded with ``encode_body``.

    Returns:
        The request options.

    Example:
        ```pycon
        >>> from arefetch.models import prepare_request_options
        >>> prepare_request_options("GET", "https://example.com", {}, body={"a": 1}).body is None
        True
        >>> prepare_request_options("POST", "https://example.com", {}, body={"a": 1}).body
        '{"a": 1}'

        ```
    """
    method = method.upper()
    if method in BODYLESS_METHODS:
        body = None
    return RequestOptions(
        method=method, url=url, headers=dict(headers), body=encode_body(body)
    )
