r"""Retry engine for HTTP requests.

This package provides the executor that drives the attempts of one
logical request, the decider that applies the retry gates, and the
immutable state threaded through the retry loop.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "AttemptState", "RetryDecider"]

from arefetch.retry.decider import RetryDecider
from arefetch.retry.executor import AsyncRetryExecutor
from arefetch.retry.state import AttemptState
