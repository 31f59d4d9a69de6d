r"""Asynchronous retry executor for HTTP requests.

This module provides the AsyncRetryExecutor class that runs the retry
loop of one logical call around an async transport.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from aresfetch.retry.decider import RetryDecider
from aresfetch.retry.issuer import issue_async
from aresfetch.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from aresfetch.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async HTTP requests with automatic retry logic.

    The executor orchestrates the following components:
    - issue_async: Performs one transport call per attempt
    - RetryDecider: Determines whether to retry based on the attempt outcome
    - RetryStrategy: Calculates the delay before the next attempt

    An executor holds no per-call state, so one instance can serve
    several concurrent calls.

    Attributes:
        config: Retry configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aresfetch.retry import AsyncRetryExecutor, RetryConfig
        >>> async def main():
        ...     executor = AsyncRetryExecutor(RetryConfig(retries=2, retry_on=(503,)))
        ...     async with httpx.AsyncClient() as client:
        ...         return await executor.execute(
        ...             "https://api.example.com/data", client.get, timeout=10.0
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, retry_config: RetryConfig) -> None:
        self.config = retry_config
        self.strategy: RetryStrategy = RetryStrategy(retry_config.retry_delay)
        self.decider: RetryDecider = RetryDecider(retry_config.retries, retry_config.retry_on)

    async def execute(
        self,
        url: str,
        transport: Callable[..., Awaitable[httpx.Response]],
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute async request with automatic retry logic.

        Attempts the request up to ``retries + 1`` times. Each attempt
        completes before the next one starts, and the loop suspends with
        ``asyncio.sleep`` between attempts.

        Args:
            url: The URL to request.
            transport: Async function performing the HTTP request. It is
                called as ``transport(url=url, **kwargs)``.
            **kwargs: Additional keyword arguments passed to the transport.

        Returns:
            The response of the last attempt, whatever its status code.

        Raises:
            Exception: The transport error of the last attempt, or the
                exception raised by a retry_on or retry_delay callable.
        """
        attempt = 0
        while True:
            outcome = await issue_async(
                transport,
                url,
                kwargs,
                self.config.transport_errors,
                buffer=self.decider.uses_predicate,
            )
            if not await self.decider.should_retry_async(attempt, outcome):
                logger.debug(f"Request to {url} settled after {attempt + 1} attempt(s)")
                return outcome.settle()

            sleep_time = self.strategy.calculate_delay(attempt, outcome)
            # Release the connection held by the discarded response.
            if outcome.response is not None:
                await outcome.response.aclose()
            if sleep_time > 0:
                await asyncio.sleep(sleep_time)
            attempt += 1
