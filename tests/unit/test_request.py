r"""Unit tests for the module-level request coroutines."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, patch

import pytest

import arefetch
from arefetch import ClientConfig, HttpStatusError
from arefetch.transport import HttpxTransport
from tests.helpers import TEST_URL, create_mock_transport, create_response, sent_options

#############################
#     Tests for request     #
#############################


@pytest.mark.asyncio
async def test_request(mock_transport: Mock) -> None:
    response = await arefetch.request("GET", TEST_URL, transport=mock_transport)

    assert response.status == 200
    assert response.data == {"key": "value"}
    mock_transport.aclose.assert_not_called()


@pytest.mark.asyncio
async def test_request_with_config(mock_asleep: Mock) -> None:
    transport = create_mock_transport(create_response(503), create_response(503))

    with pytest.raises(HttpStatusError):
        await arefetch.request(
            "GET", TEST_URL, config=ClientConfig(max_retries=1), transport=transport, retry_delay=5
        )

    assert transport.send.await_count == 2
    mock_asleep.assert_called_once_with(0.005)


@pytest.mark.asyncio
async def test_request_closes_own_transport() -> None:
    with patch("arefetch.client.HttpxTransport") as mock_transport_class:
        mock_transport = Mock(
            send=AsyncMock(return_value=create_response(200)), aclose=AsyncMock()
        )
        mock_transport_class.return_value = mock_transport

        await arefetch.get(TEST_URL)

    mock_transport.aclose.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("func", "method"),
    [
        (arefetch.get, "GET"),
        (arefetch.head, "HEAD"),
        (arefetch.options, "OPTIONS"),
        (arefetch.delete, "DELETE"),
    ],
)
async def test_request_methods_without_body(func: object, method: str) -> None:
    transport = Mock(spec=HttpxTransport, send=AsyncMock(return_value=create_response(200)))

    await func(TEST_URL, transport=transport)

    options = sent_options(transport)[0]
    assert options.method == method
    assert options.body is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("func", "method"),
    [
        (arefetch.post, "POST"),
        (arefetch.put, "PUT"),
        (arefetch.patch, "PATCH"),
        (arefetch.delete, "DELETE"),
    ],
)
async def test_request_methods_with_body(func: object, method: str) -> None:
    transport = Mock(spec=HttpxTransport, send=AsyncMock(return_value=create_response(200)))

    await func(TEST_URL, {"key": "value"}, transport=transport)

    options = sent_options(transport)[0]
    assert options.method == method
    assert options.body == '{"key": "value"}'
