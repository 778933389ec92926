r"""Asynchronous retry executor for HTTP requests.

This module provides the AsyncRetryExecutor class that drives one
logical request across several physical attempts, enforcing the
per-attempt timeout and the delay between retries.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from arefetch.backoff import backoff_from_config
from arefetch.callbacks import invoke_on_retry
from arefetch.exceptions import MaxRetriesExhaustedError
from arefetch.models import FetchResponse, prepare_request_options
from arefetch.retry.decider import RetryDecider
from arefetch.retry.state import AttemptState
from arefetch.utils.exceptions import classify_exception
from arefetch.utils.response import build_http_error, parse_response_body
from arefetch.utils.url import build_url

if TYPE_CHECKING:
    import httpx

    from arefetch.core.config import ClientConfig
    from arefetch.exceptions import FetchError
    from arefetch.models import RequestOptions
    from arefetch.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async HTTP requests with automatic retry logic.

    Each call to ``execute`` owns its own ``AttemptState``, so one
    executor can serve concurrent calls. Attempts of a single call are
    always sequential.

    The loop handles:
    - Successful responses (status 200-299): Returns immediately
    - Retryable status codes (e.g., 500, 502, 503): Retries with backoff
    - Non-retryable status codes (e.g., 404): Raises immediately
    - Network errors: Retries with backoff if ``retry_on_network_error``
    - Timeouts and unexpected errors: Raises immediately

    Args:
        config: The resolved configuration of the request.
        transport: The transport used to send each attempt.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arefetch.core import ClientConfig
        >>> from arefetch.retry import AsyncRetryExecutor
        >>> from arefetch.transport import HttpxTransport
        >>> async def main():  # doctest: +SKIP
        ...     transport = HttpxTransport()
        ...     executor = AsyncRetryExecutor(ClientConfig(max_retries=2, timeout=5000), transport)
        ...     try:
        ...         return await executor.execute("GET", "https://api.example.com/data")
        ...     finally:
        ...         await transport.aclose()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, config: ClientConfig, transport: Transport) -> None:
        self.config = config
        self.transport = transport
        self.strategy = backoff_from_config(config)
        self.decider = RetryDecider(config.retry_status_codes, config.retry_on_network_error)

    async def execute(self, method: str, url: str, body: Any = None) -> FetchResponse:
        """Execute async request with automatic retry logic.

        Args:
            method: The HTTP method (e.g., "GET", "POST").
            url: The request URL, prefixed with ``base_url`` if set.
            body: The request body. Dropped for GET and HEAD, JSON
                encoded unless it is text, bytes or a ``MultipartForm``.

        Returns:
            The normalized response of the first successful attempt.

        Raises:
            HttpStatusError: If a non-retryable status code is received
                or the retries are exhausted on a retryable one.
            NetworkError: If the transport fails and the failure is not
                retried.
            RequestTimeoutError: If an attempt exceeds ``timeout``.
            UnknownRequestError: If any other exception is raised,
                including a body that cannot be JSON encoded.
        """
        method = method.upper()
        full_url = build_url(self.config.base_url, url)
        state = AttemptState.initial(self.config.max_retries, self.strategy)

        while state.retries_remaining >= 0:
            try:
                options = prepare_request_options(method, full_url, self.config.headers, body)
                response = await self._send(options)
            except Exception as exc:
                error = classify_exception(
                    exc, url=full_url, method=method, timeout=self.config.timeout
                )
                should_retry, reason = self.decider.should_retry_error(
                    error, state.retries_remaining
                )
                if not should_retry:
                    logger.debug(f"{method} request to {full_url} failed: {error} ({reason})")
                    if error is exc:
                        raise
                    raise error from exc
                await self._wait_before_retry(state, error, status_code=None, reason=reason)
                state = state.next_attempt(self.strategy)
                continue

            data = parse_response_body(response)
            if response.is_success:
                logger.debug(
                    f"{method} request to {full_url} succeeded with status "
                    f"{response.status_code} on attempt {state.attempt + 1}"
                )
                return FetchResponse(
                    data=data,
                    status=response.status_code,
                    status_text=response.reason_phrase,
                    headers=response.headers,
                    request=options,
                    raw_response=response,
                )

            error = build_http_error(response, data, url=full_url, method=method)
            should_retry, reason = self.decider.should_retry_response(
                response.status_code, state.retries_remaining
            )
            if not should_retry:
                logger.debug(f"{method} request to {full_url} failed: {error} ({reason})")
                raise error
            await self._wait_before_retry(
                state, error, status_code=response.status_code, reason=reason
            )
            state = state.next_attempt(self.strategy)

        raise MaxRetriesExhaustedError(
            method=method,
            url=full_url,
            message=f"{method} request to {full_url} exhausted its retries without success",
        )

    async def _send(self, options: RequestOptions) -> httpx.Response:
        """Send one attempt, cancelling it once the timeout elapses.

        Args:
            options: The options of the attempt.

        Returns:
            The transport response.
        """
        if self.config.timeout > 0:
            return await asyncio.wait_for(
                self.transport.send(options), timeout=self.config.timeout / 1000
            )
        return await self.transport.send(options)

    async def _wait_before_retry(
        self,
        state: AttemptState,
        error: FetchError,
        status_code: int | None,
        reason: str,
    ) -> None:
        """Notify the retry and sleep for the current delay.

        Args:
            state: The state of the attempt that just failed.
            error: The classified error of the failed attempt.
            status_code: The HTTP status code, if a response was received.
            reason: The reason of the retry, used for logging.
        """
        logger.debug(
            f"{error.method} request to {error.url}: will retry ({reason}) in "
            f"{state.current_delay}ms, {state.retries_remaining} retries left"
        )
        invoke_on_retry(
            self.config.on_retry,
            url=error.url,
            method=error.method,
            attempt=state.attempt,
            retries_remaining=state.retries_remaining,
            wait_time=state.current_delay,
            error=error,
            status_code=status_code,
        )
        await asyncio.sleep(state.current_delay / 1000)
