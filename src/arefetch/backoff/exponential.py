r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from arefetch.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt). The delay doubles
    after each retry and is not capped.

    Args:
        base_delay: The delay in milliseconds before the first retry.

    Example:
        ```pycon
        >>> from arefetch.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=1000)
        >>> backoff.calculate(0)  # First retry
        1000
        >>> backoff.calculate(1)  # Second retry
        2000
        >>> backoff.calculate(2)  # Third retry
        4000

        ```
    """

    def __init__(self, base_delay: float = 1000) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The retry number (0-indexed).

        Returns:
            The calculated delay: base_delay * (2 ** attempt).
        """
        return self.base_delay * (2**attempt)
