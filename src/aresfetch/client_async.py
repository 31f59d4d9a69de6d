r"""Asynchronous context manager client for retryable HTTP requests.

This module provides an async context manager-based client for making
multiple HTTP requests with shared retry configuration. The
AsyncRetryClient manages the underlying httpx.AsyncClient lifecycle
when it creates it.
"""

from __future__ import annotations

__all__ = ["AsyncRetryClient"]

import functools
from typing import TYPE_CHECKING, Any

import httpx

from aresfetch.config import DEFAULT_TIMEOUT
from aresfetch.core.validation import validate_timeout
from aresfetch.request_async import retryable_request_async
from aresfetch.retry import RetryConfig

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self


class AsyncRetryClient:
    r"""Asynchronous context manager for retryable HTTP requests.

    Args:
        config: Optional RetryConfig used by every request. If ``None``,
            a default RetryConfig is used.
        client: Optional httpx.AsyncClient instance to use for requests.
            A client passed by the caller is never closed by
            ``AsyncRetryClient``.
        timeout: Timeout of the httpx.AsyncClient created when ``client``
            is ``None``. Must be > 0.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aresfetch import AsyncRetryClient
        >>> from aresfetch.retry import RetryConfig
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncRetryClient(config=RetryConfig(retries=5), timeout=30) as client:
        ...         response1 = await client.get("https://api.example.com/data1")
        ...         response2 = await client.post(
        ...             "https://api.example.com/data2", json={"key": "value"}, retry_on=[503]
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        *,
        config: RetryConfig | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._config: RetryConfig = config or RetryConfig()
        self._close_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created
        it."""
        if self._close_client:
            await self._client.aclose()

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        r"""Send an HTTP request with automatic retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS, etc.).
            url: The URL to send the request to.
            **kwargs: Retry options overriding the client configuration,
                and keyword arguments passed to httpx.AsyncClient.request().

        Returns:
            The response of the last attempt.
        """
        return await retryable_request_async(
            url,
            functools.partial(self._client.request, method),
            config=self._config,
            **kwargs,
        )

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP GET request with automatic retry logic."""
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP POST request with automatic retry logic."""
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP PUT request with automatic retry logic."""
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP DELETE request with automatic retry logic."""
        return await self.request("DELETE", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP PATCH request with automatic retry logic."""
        return await self.request("PATCH", url, **kwargs)

    async def head(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP HEAD request with automatic retry logic."""
        return await self.request("HEAD", url, **kwargs)

    async def options(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP OPTIONS request with automatic retry logic."""
        return await self.request("OPTIONS", url, **kwargs)
