r"""Per-invocation state of the retry loop."""

from __future__ import annotations

__all__ = ["AttemptState"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arefetch.backoff import BaseBackoffStrategy


@dataclass(frozen=True)
class AttemptState:
    """Immutable snapshot of the retry loop between two attempts.

    A new state is produced for each attempt, so nothing is shared
    between invocations of the engine.

    Attributes:
        attempt: The current attempt number (0-indexed).
        retries_remaining: The retries still available.
        current_delay: The delay in milliseconds before the next retry.

    Example:
        ```pycon
        >>> from arefetch.backoff import ExponentialBackoff
        >>> from arefetch.retry.state import AttemptState
        >>> backoff = ExponentialBackoff(base_delay=1000)
        >>> state = AttemptState.initial(max_retries=2, strategy=backoff)
        >>> state
        AttemptState(attempt=0, retries_remaining=2, current_delay=1000)
        >>> state.next_attempt(backoff)
        AttemptState(attempt=1, retries_remaining=1, current_delay=2000)

        ```
    """

    attempt: int
    retries_remaining: int
    current_delay: float

    @classmethod
    def initial(cls, max_retries: int, strategy: BaseBackoffStrategy) -> AttemptState:
        """Create the state of the first attempt.

        Args:
            max_retries: The number of retries allowed after the first
                attempt.
            strategy: The backoff strategy.

        Returns:
            The initial state.
        """
        return cls(attempt=0, retries_remaining=max_retries, current_delay=strategy.calculate(0))

    def next_attempt(self, strategy: BaseBackoffStrategy) -> AttemptState:
        """Consume one retry and compute the delay of the following one.

        Args:
            strategy: The backoff strategy.

        Returns:
            The state of the next attempt.
        """
        attempt = self.attempt + 1
        return AttemptState(
            attempt=attempt,
            retries_remaining=self.retries_remaining - 1,
            current_delay=strategy.calculate(attempt),
        )
