r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from arefetch.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry, regardless of the retry
    number.

    Args:
        delay: The fixed delay in milliseconds.

    Example:
        ```pycon
        >>> from arefetch.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=250)
        >>> backoff.calculate(0)
        250
        >>> backoff.calculate(10)
        250

        ```
    """

    def __init__(self, delay: float = 1000) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant backoff delay.

        Args:
            attempt: The retry number (0-indexed, unused).

        Returns:
            The fixed delay value.
        """
        return self.delay
