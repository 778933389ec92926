from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from arefetch.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a successful httpx.Response with a JSON body for
    testing."""
    return httpx.Response(200, json={"key": "value"})


@pytest.fixture
def mock_transport(mock_response: httpx.Response) -> Mock:
    """Create a mock transport that always returns ``mock_response``."""
    return Mock(
        spec=HttpxTransport, send=AsyncMock(return_value=mock_response), aclose=AsyncMock()
    )


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks.

    Returns:
        A Mock object that can be used as a callback function.
    """
    return Mock()
