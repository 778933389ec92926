r"""Backoff strategies for retry delays.

This package provides the backoff strategies used by the retry engine
to compute the delay before each retry.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "backoff_from_config",
]

from typing import TYPE_CHECKING

from arefetch.backoff.base import BaseBackoffStrategy
from arefetch.backoff.constant import ConstantBackoff
from arefetch.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from arefetch.core.config import ClientConfig


def backoff_from_config(config: ClientConfig) -> BaseBackoffStrategy:
    r"""Instantiate the backoff strategy described by a configuration.

    Args:
        config: The configuration.

    Returns:
        ``ExponentialBackoff`` if ``exponential_backoff`` is enabled,
        ``ConstantBackoff`` otherwise. Both start at ``retry_delay``.

    Example:
        ```pycon
        >>> from arefetch.backoff import backoff_from_config
        >>> from arefetch.core import ClientConfig
        >>> backoff_from_config(ClientConfig(retry_delay=500))
        ExponentialBackoff(base_delay=500)
        >>> backoff_from_config(ClientConfig(exponential_backoff=False))
        ConstantBackoff(delay=1000)

        ```
    """
    if config.exponential_backoff:
        return ExponentialBackoff(base_delay=config.retry_delay)
    return ConstantBackoff(delay=config.retry_delay)
