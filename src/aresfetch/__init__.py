r"""aresfetch - Retry any HTTP request function.

This package wraps an HTTP request function (an httpx client method, or
any callable returning an httpx.Response) with configurable retry logic.
The wrapped call is a drop-in replacement of the original one: it returns
the response of the last attempt, whatever its status code, or raises the
transport error of the last attempt.

Key Features:
    - Retry on transport errors (default), on a set of status codes, or on a
      custom decision function (sync or async) that can inspect the body
    - Fixed delay or custom delay function between attempts
    - Async and blocking APIs
    - Transport wrappers and context manager clients with shared defaults

Example:
    ```pycon
    >>> import httpx
    >>> from aresfetch import retryable_request
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = retryable_request(
    ...         "https://api.example.com/data",
    ...         client.get,
    ...         retries=3,
    ...         retry_delay=0.1,
    ...         retry_on=[503],
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_TRANSPORT_ERRORS",
    "AsyncRetryClient",
    "RetryClient",
    "RetryConfig",
    "__version__",
    "retryable_request",
    "retryable_request_async",
    "with_retry",
    "with_retry_async",
]

from importlib.metadata import PackageNotFoundError, version

from aresfetch.client import RetryClient
from aresfetch.client_async import AsyncRetryClient
from aresfetch.config import (
    DEFAULT_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSPORT_ERRORS,
)
from aresfetch.request import retryable_request
from aresfetch.request_async import retryable_request_async
from aresfetch.retry import RetryConfig
from aresfetch.wrap import with_retry, with_retry_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
