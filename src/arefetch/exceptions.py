r"""Define the classified errors raised by the fetch client.

Every failure that crosses the public boundary is a ``FetchError``. Each
variant carries exactly the fields that are meaningful for its kind, and
``error_type`` identifies the kind without an ``isinstance`` check.
"""

from __future__ import annotations

__all__ = [
    "ErrorType",
    "FetchError",
    "HttpStatusError",
    "MaxRetriesExhaustedError",
    "NetworkError",
    "RequestTimeoutError",
    "UnknownRequestError",
]

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class ErrorType(str, Enum):
    """Closed set of error kinds produced by the classifier."""

    NETWORK_ERROR = "NETWORK_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    MAX_RETRIES_EXHAUSTED = "MAX_RETRIES_EXHAUSTED"


class FetchError(Exception):
    """Base class of all the classified request errors.

    Args:
        method: The HTTP method of the failed request.
        url: The resolved URL of the failed request.
        message: A descriptive error message.
        cause: The underlying exception, if any.

    Attributes:
        error_type: The kind of error.
    """

    error_type: ErrorType = ErrorType.UNKNOWN_ERROR

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, message={self.message!r})"


class NetworkError(FetchError):
    """Raised when the transport fails to reach the server."""

    error_type = ErrorType.NETWORK_ERROR


class HttpStatusError(FetchError):
    r"""Raised when a response carries a non-success status code.

    Args:
        method: The HTTP method of the failed request.
        url: The resolved URL of the failed request.
        message: A descriptive error message.
        status: The HTTP status code of the response.
        data: The parsed body of the error response.
        response: The raw response.

    Example:
        ```pycon
        >>> from arefetch.exceptions import HttpStatusError
        >>> error = HttpStatusError(
        ...     "GET", "https://example.com", "Request failed with status 404", status=404
        ... )
        >>> error.status
        404
        >>> error.error_type.value
        'HTTP_ERROR'

        ```
    """

    error_type = ErrorType.HTTP_ERROR

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status: int,
        data: Any = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(method=method, url=url, message=message)
        self.status = status
        self.data = data
        self.response = response


class RequestTimeoutError(FetchError):
    """Raised when an attempt exceeds its time budget.

    Args:
        method: The HTTP method of the failed request.
        url: The resolved URL of the failed request.
        message: A descriptive error message.
        timeout: The configured timeout in milliseconds.
        cause: The underlying exception, if any.
    """

    error_type = ErrorType.TIMEOUT_ERROR

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        timeout: int,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(method=method, url=url, message=message, cause=cause)
        self.timeout = timeout


class UnknownRequestError(FetchError):
    """Raised for failures that match no other error kind."""

    error_type = ErrorType.UNKNOWN_ERROR


class MaxRetriesExhaustedError(FetchError):
    """Raised when the retry loop ends without a result."""

    error_type = ErrorType.MAX_RETRIES_EXHAUSTED

    def __init__(self, method: str, url: str, message: str) -> None:
        super().__init__(method=method, url=url, message=message)
