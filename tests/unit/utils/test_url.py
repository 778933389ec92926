from __future__ import annotations

import pytest

from arefetch.utils import build_url


@pytest.mark.parametrize(
    ("base_url", "url", "expected"),
    [
        ("", "https://example.com/data", "https://example.com/data"),
        ("https://example.com", "/data", "https://example.com/data"),
        ("https://example.com/", "/data", "https://example.com//data"),
        ("https://example.com/api", "", "https://example.com/api"),
        ("https://example.com", "data", "https://example.comdata"),
    ],
)
def test_build_url(base_url: str, url: str, expected: str) -> None:
    """Test that the base URL is concatenated literally."""
    assert build_url(base_url, url) == expected
