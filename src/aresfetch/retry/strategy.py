r"""Retry strategy for calculating the delay between attempts."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from aresfetch.core.validation import validate_delay

if TYPE_CHECKING:
    from aresfetch.retry.config import DelayFunc
    from aresfetch.retry.outcome import AttemptOutcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating retry delays.

    Args:
        retry_delay: A fixed delay in seconds, or a callable computing it
            from ``(attempt, error, response)``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch.retry import AttemptOutcome, RetryStrategy
        >>> outcome = AttemptOutcome(response=httpx.Response(503))
        >>> RetryStrategy(0.5).calculate_delay(2, outcome)
        0.5
        >>> strategy = RetryStrategy(lambda attempt, error, response: 2**attempt * 0.1)
        >>> strategy.calculate_delay(2, outcome)
        0.4

        ```
    """

    def __init__(self, retry_delay: float | DelayFunc) -> None:
        self.retry_delay = retry_delay

    def calculate_delay(self, attempt: int, outcome: AttemptOutcome) -> float:
        """Calculate delay before next retry.

        Args:
            attempt: Current attempt number (0-indexed).
            outcome: The outcome of the attempt that will be retried.

        Returns:
            Sleep time in seconds.

        Raises:
            TypeError: If the delay callable does not return a number.
            ValueError: If the delay callable returns a negative number.
        """
        if not callable(self.retry_delay):
            sleep_time = self.retry_delay
        else:
            sleep_time = self.retry_delay(attempt, outcome.error, outcome.response)
            validate_delay(sleep_time)
        logger.debug(f"Waiting {sleep_time:.2f}s before retry")
        return sleep_time
