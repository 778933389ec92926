r"""URL utilities."""

from __future__ import annotations

__all__ = ["build_url"]


def build_url(base_url: str, url: str) -> str:
    r"""Compute the full URL of a request.

    The base URL is prepended literally, without any slash
    normalization.

    Args:
        base_url: The base URL. An empty string means no prefix.
        url: The request URL.

    Returns:
        The full URL.

    Example:
        ```pycon
        >>> from arefetch.utils.url import build_url
        >>> build_url("https://api.example.com", "/users")
        'https://api.example.com/users'
        >>> build_url("https://api.example.com/", "/users")
        'https://api.example.com//users'
        >>> build_url("", "https://example.com")
        'https://example.com'

        ```
    """
    if base_url:
        return f"{base_url}{url}"
    return url
