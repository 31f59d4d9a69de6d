r"""Synchronous retry executor for HTTP requests."""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any

from aresfetch.retry.decider import RetryDecider
from aresfetch.retry.issuer import issue
from aresfetch.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from aresfetch.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes HTTP requests with automatic retry logic.

    Blocking counterpart of AsyncRetryExecutor. The retry_on callable,
    if any, must be synchronous.

    Attributes:
        config: Retry configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
    """

    def __init__(self, retry_config: RetryConfig) -> None:
        self.config = retry_config
        self.strategy: RetryStrategy = RetryStrategy(retry_config.retry_delay)
        self.decider: RetryDecider = RetryDecider(retry_config.retries, retry_config.retry_on)

    def execute(
        self,
        url: str,
        transport: Callable[..., httpx.Response],
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute request with automatic retry logic.

        Args:
            url: The URL to request.
            transport: Function performing the HTTP request. It is called
                as ``transport(url=url, **kwargs)``.
            **kwargs: Additional keyword arguments passed to the transport.

        Returns:
            The response of the last attempt, whatever its status code.

        Raises:
            Exception: The transport error of the last attempt, or the
                exception raised by a retry_on or retry_delay callable.
            TypeError: If retry_on returns an awaitable.
        """
        attempt = 0
        while True:
            outcome = issue(
                transport,
                url,
                kwargs,
                self.config.transport_errors,
                buffer=self.decider.uses_predicate,
            )
            if not self.decider.should_retry(attempt, outcome):
                logger.debug(f"Request to {url} settled after {attempt + 1} attempt(s)")
                return outcome.settle()

            sleep_time = self.strategy.calculate_delay(attempt, outcome)
            # Release the connection held by the discarded response.
            if outcome.response is not None:
                outcome.response.close()
            if sleep_time > 0:
                time.sleep(sleep_time)
            attempt += 1
