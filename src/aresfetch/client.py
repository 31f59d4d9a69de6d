r"""Synchronous context manager client for retryable HTTP requests.

This module provides a context manager-based client for making multiple
HTTP requests with shared retry configuration.
"""

from __future__ import annotations

__all__ = ["RetryClient"]

import functools
from typing import TYPE_CHECKING, Any

import httpx

from aresfetch.config import DEFAULT_TIMEOUT
from aresfetch.core.validation import validate_timeout
from aresfetch.request import retryable_request
from aresfetch.retry import RetryConfig

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self


class RetryClient:
    r"""Synchronous context manager for retryable HTTP requests.

    If no ``httpx.Client`` is given, the client creates one and closes it
    when the context exits. A client passed by the caller is never closed
    by ``RetryClient``.

    Args:
        config: Optional RetryConfig used by every request. If ``None``,
            a default RetryConfig is used.
        client: Optional httpx.Client instance to use for requests.
        timeout: Timeout of the httpx.Client created when ``client`` is
            ``None``. Must be > 0.

    Example:
        ```pycon
        >>> from aresfetch import RetryClient
        >>> from aresfetch.retry import RetryConfig
        >>> with RetryClient(config=RetryConfig(retries=5, retry_on=[503])) as client:  # doctest: +SKIP
        ...     response1 = client.get("https://api.example.com/data1")
        ...     response2 = client.post("https://api.example.com/data2", json={"key": "value"})
        ...

        ```

    Note:
        Every HTTP method accepts the retry options (``retries``,
        ``retry_delay``, ``retry_on``, ``transport_errors``) to override
        the client configuration for one request.
    """

    def __init__(
        self,
        *,
        config: RetryConfig | None = None,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._config: RetryConfig = config or RetryConfig()
        self._close_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this instance created
        it."""
        if self._close_client:
            self._client.close()

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        r"""Send an HTTP request with automatic retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, OPTIONS, etc.).
            url: The URL to send the request to.
            **kwargs: Retry options overriding the client configuration,
                and keyword arguments passed to httpx.Client.request().

        Returns:
            The response of the last attempt.
        """
        return retryable_request(
            url,
            functools.partial(self._client.request, method),
            config=self._config,
            **kwargs,
        )

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP GET request with automatic retry logic."""
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP POST request with automatic retry logic."""
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP PUT request with automatic retry logic."""
        return self.request("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP DELETE request with automatic retry logic."""
        return self.request("DELETE", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP PATCH request with automatic retry logic."""
        return self.request("PATCH", url, **kwargs)

    def head(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP HEAD request with automatic retry logic."""
        return self.request("HEAD", url, **kwargs)

    def options(self, url: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP OPTIONS request with automatic retry logic."""
        return self.request("OPTIONS", url, **kwargs)
