r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from arefetch.backoff.constant import ConstantBackoff


@pytest.mark.parametrize("attempt", [0, 1, 2, 10])
def test_constant_backoff(attempt: int) -> None:
    """Test that the delay does not depend on the attempt."""
    assert ConstantBackoff(delay=250).calculate(attempt) == 250


def test_constant_backoff_default_values() -> None:
    assert ConstantBackoff().delay == 1000


def test_constant_backoff_invalid_delay() -> None:
    """Test that negative delay raises ValueError."""
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(delay=-0.5)


def test_constant_backoff_repr() -> None:
    assert repr(ConstantBackoff(delay=250)) == "ConstantBackoff(delay=250)"
