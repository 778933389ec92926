r"""Integration tests for AsyncFetchClient against httpbin.org."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from arefetch import AsyncFetchClient, HttpStatusError, MultipartForm
from tests.helpers import HTTPBIN_URL


@pytest.mark.asyncio
async def test_client_get() -> None:
    async with AsyncFetchClient(base_url=HTTPBIN_URL, timeout=30000) as client:
        response = await client.get("/get", headers={"X-Custom-Header": "test-value"})

    assert response.status == 200
    assert response.data["headers"]["X-Custom-Header"] == "test-value"


@pytest.mark.asyncio
async def test_client_post_json() -> None:
    async with AsyncFetchClient(base_url=HTTPBIN_URL, timeout=30000) as client:
        response = await client.post("/post", {"key": "value"})

    assert response.status == 200
    assert response.data["json"] == {"key": "value"}


@pytest.mark.asyncio
async def test_client_post_multipart() -> None:
    async with AsyncFetchClient(base_url=HTTPBIN_URL, timeout=30000) as client:
        response = await client.post(
            "/post", MultipartForm(data={"name": "report"}, files={"file": ("a.txt", b"abc")})
        )

    assert response.status == 200
    assert response.data["form"] == {"name": "report"}
    assert response.data["files"] == {"file": "abc"}


@pytest.mark.asyncio
async def test_client_text_response() -> None:
    async with AsyncFetchClient(base_url=HTTPBIN_URL, timeout=30000) as client:
        response = await client.get("/html")

    assert response.status == 200
    assert isinstance(response.data, str)
    assert "<html>" in response.data


@pytest.mark.asyncio
async def test_client_non_retryable_status() -> None:
    async with AsyncFetchClient(base_url=HTTPBIN_URL, timeout=30000) as client:
        with pytest.raises(HttpStatusError) as exc_info:
            await client.get("/status/404")

    assert exc_info.value.status == 404


@pytest.mark.asyncio
async def test_client_retryable_status_exhausted(mock_callback: Mock) -> None:
    async with AsyncFetchClient(
        base_url=HTTPBIN_URL, timeout=30000, max_retries=1, retry_delay=10, on_retry=mock_callback
    ) as client:
        with pytest.raises(HttpStatusError) as exc_info:
            await client.get("/status/503")

    assert exc_info.value.status == 503
    mock_callback.assert_called_once()
