r"""Factories wrapping a transport function with automatic retry logic.

The wrapped function keeps the signature of the transport and accepts
the retry options as extra keyword arguments, so it can be used as a
drop-in replacement of the transport.

Example:
    ```pycon
    >>> import httpx
    >>> from aresfetch import with_retry_async
    >>> async def main():  # doctest: +SKIP
    ...     async with httpx.AsyncClient() as client:
    ...         get = with_retry_async(client.get, retries=5, retry_on=[503])
    ...         response = await get("https://api.example.com/data", retry_delay=0.2)
    ...

    ```
"""

from __future__ import annotations

__all__ = ["with_retry", "with_retry_async"]

from typing import TYPE_CHECKING, Any

from aresfetch.request import retryable_request
from aresfetch.request_async import retryable_request_async
from aresfetch.retry import RetryConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx


def with_retry(
    transport: Callable[..., httpx.Response], **defaults: Any
) -> Callable[..., httpx.Response]:
    """Wrap a blocking transport with automatic retry logic.

    Args:
        transport: The function performing one HTTP request.
        **defaults: Default retry options (``retries``, ``retry_delay``,
            ``retry_on``, ``transport_errors``). Options given to a call
            take precedence.

    Returns:
        A function ``(url, **options) -> httpx.Response``.

    Raises:
        TypeError: If a default is not a retry option, or has the wrong
            kind.
        ValueError: If a default is out of range.
    """
    config = RetryConfig(**defaults)

    def wrapper(url: str, **options: Any) -> httpx.Response:
        return retryable_request(url, transport, config=config, **options)

    return wrapper


def with_retry_async(
    transport: Callable[..., Awaitable[httpx.Response]], **defaults: Any
) -> Callable[..., Awaitable[httpx.Response]]:
    """Wrap an async transport with automatic retry logic.

    Args:
        transport: The async function performing one HTTP request.
        **defaults: Default retry options (``retries``, ``retry_delay``,
            ``retry_on``, ``transport_errors``). Options given to a call
            take precedence.

    Returns:
        A coroutine function ``(url, **options) -> httpx.Response``.

    Raises:
        TypeError: If a default is not a retry option, or has the wrong
            kind.
        ValueError: If a default is out of range.
    """
    config = RetryConfig(**defaults)

    async def wrapper(url: str, **options: Any) -> httpx.Response:
        return await retryable_request_async(url, transport, config=config, **options)

    return wrapper
