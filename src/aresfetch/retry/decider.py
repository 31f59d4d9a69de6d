r"""Retry decision logic for determining whether to retry requests.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether a request should be retried based on the attempt
outcome, the retry cap, and either a set of status codes or a custom
decision function.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import inspect
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aresfetch.retry.config import RetryOnFunc
    from aresfetch.retry.outcome import AttemptOutcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a request should be retried.

    Args:
        retries: Maximum number of retries.
        retry_on: ``None`` to retry only on transport errors, a tuple of
            retryable status codes, or a decision callable.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch.retry import AttemptOutcome, RetryDecider
        >>> decider = RetryDecider(retries=3, retry_on=(503,))
        >>> decider.should_retry(0, AttemptOutcome(response=httpx.Response(503)))
        True
        >>> decider.should_retry(3, AttemptOutcome(response=httpx.Response(503)))
        False
        >>> decider.should_retry(0, AttemptOutcome(response=httpx.Response(200)))
        False

        ```
    """

    def __init__(self, retries: int, retry_on: tuple[int, ...] | RetryOnFunc | None) -> None:
        self.retries = retries
        self.retry_on = retry_on

    @property
    def uses_predicate(self) -> bool:
        """Whether the decision is delegated to a custom callable."""
        return callable(self.retry_on)

    def should_retry(self, attempt: int, outcome: AttemptOutcome) -> bool:
        """Determine if the outcome should trigger a retry.

        A decision callable returning an awaitable is rejected because
        it cannot be awaited here.

        Args:
            attempt: Current attempt number (0-indexed).
            outcome: The outcome of the attempt.

        Returns:
            ``True`` if another attempt should be made.

        Raises:
            TypeError: If the decision callable returns an awaitable.
        """
        if self._is_exhausted(attempt):
            return False
        if not self.uses_predicate:
            return self._matches(outcome)

        decision = self._call_predicate(attempt, outcome)
        if inspect.isawaitable(decision):
            if inspect.iscoroutine(decision):
                decision.close()
            msg = (
                "retry_on returned an awaitable in a blocking call, "
                "use the async API for async decision functions"
            )
            raise TypeError(msg)
        return self._log_decision(attempt, bool(decision))

    async def should_retry_async(self, attempt: int, outcome: AttemptOutcome) -> bool:
        """Determine if the outcome should trigger a retry.

        Synchronous and asynchronous decision callables share this path:
        the result is awaited only when it is awaitable.

        Args:
            attempt: Current attempt number (0-indexed).
            outcome: The outcome of the attempt.

        Returns:
            ``True`` if another attempt should be made.
        """
        if self._is_exhausted(attempt):
            return False
        if not self.uses_predicate:
            return self._matches(outcome)

        decision = self._call_predicate(attempt, outcome)
        if inspect.isawaitable(decision):
            decision = await decision
        return self._log_decision(attempt, bool(decision))

    def _is_exhausted(self, attempt: int) -> bool:
        if attempt >= self.retries:
            logger.debug(f"No retry left after attempt {attempt + 1}/{self.retries + 1}")
            return True
        return False

    def _call_predicate(self, attempt: int, outcome: AttemptOutcome) -> Any:
        return self.retry_on(attempt, outcome.error, outcome.response)

    def _matches(self, outcome: AttemptOutcome) -> bool:
        """Apply the status-code (or default) policy to the outcome."""
        if outcome.error is not None:
            logger.debug(f"Will retry ({type(outcome.error).__name__})")
            return True
        if self.retry_on is not None and outcome.status_code in self.retry_on:
            logger.debug(f"Will retry (status {outcome.status_code})")
            return True
        return False

    def _log_decision(self, attempt: int, decision: bool) -> bool:
        logger.debug(f"retry_on returned {decision} for attempt {attempt + 1}")
        return decision
