r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import pytest

from arefetch.backoff.exponential import ExponentialBackoff


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(base_delay=1000)
    assert backoff.calculate(0) == 1000  # 1000 * 2^0
    assert backoff.calculate(1) == 2000  # 1000 * 2^1
    assert backoff.calculate(2) == 4000  # 1000 * 2^2
    assert backoff.calculate(3) == 8000  # 1000 * 2^3


def test_exponential_backoff_is_not_capped() -> None:
    """Test that the delay keeps growing without a maximum."""
    backoff = ExponentialBackoff(base_delay=1000)
    assert backoff.calculate(20) == 1000 * 2**20


def test_exponential_backoff_default_values() -> None:
    """Test exponential backoff with default values."""
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 1000
    assert backoff.calculate(0) == 1000


def test_exponential_backoff_zero_base_delay() -> None:
    """Test exponential backoff with zero base_delay."""
    backoff = ExponentialBackoff(base_delay=0)
    assert backoff.calculate(0) == 0
    assert backoff.calculate(5) == 0


def test_exponential_backoff_invalid_base_delay() -> None:
    """Test that negative base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        ExponentialBackoff(base_delay=-1)


def test_exponential_backoff_repr() -> None:
    assert repr(ExponentialBackoff(base_delay=500)) == "ExponentialBackoff(base_delay=500)"
