r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryConfig: Configuration for retry behavior
    - split_options: Separation of retry options from transport options
    - AttemptOutcome: Result of one transport invocation
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "RetryConfig",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
    "issue",
    "issue_async",
    "split_options",
]

from aresfetch.retry.config import RetryConfig, split_options
from aresfetch.retry.decider import RetryDecider
from aresfetch.retry.executor import RetryExecutor
from aresfetch.retry.executor_async import AsyncRetryExecutor
from aresfetch.retry.issuer import issue, issue_async
from aresfetch.retry.outcome import AttemptOutcome
from aresfetch.retry.strategy import RetryStrategy
