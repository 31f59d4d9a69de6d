r"""Contains the asynchronous request function with automatic retry
logic."""

from __future__ import annotations

__all__ = ["retryable_request_async"]

from typing import TYPE_CHECKING, Any

from aresfetch.retry import AsyncRetryExecutor, split_options

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from aresfetch.retry import RetryConfig


async def retryable_request_async(
    url: str,
    transport: Callable[..., Awaitable[httpx.Response]],
    *,
    config: RetryConfig | None = None,
    **options: Any,
) -> httpx.Response:
    """Perform an async HTTP request with automatic retry logic.

    The transport is attempted up to ``retries + 1`` times. After each
    attempt, the retry policy decides whether to try again:

    - ``retry_on=None`` (default): retry only when the transport raises
      one of ``transport_errors``
    - ``retry_on=[503, ...]``: also retry when the response status code is
      in the collection
    - ``retry_on=callable``: the callable decides from
      ``(attempt, error, response)`` and may be a coroutine function

    When retrying stops, the call behaves exactly like a single call to
    the transport: it returns the last response, whatever its status
    code, or raises the last transport error.

    Args:
        url: The URL to send the request to.
        transport: The async function performing one HTTP request (e.g.,
            client.get, or ``functools.partial(client.request, "POST")``).
            It is called as ``transport(url=url, **transport_options)``.
        config: Optional RetryConfig providing the retry options absent
            from ``options``.
        **options: Retry options (``retries``, ``retry_delay``,
            ``retry_on``, ``transport_errors``) and any other keyword
            argument, which is forwarded to the transport.

    Returns:
        The response of the last attempt.

    Raises:
        TypeError: If a retry option has the wrong kind.
        ValueError: If a retry option is out of range.
        Exception: The transport error of the last attempt, or the
            exception raised by a retry_on or retry_delay callable.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aresfetch import retryable_request_async
        >>> async def example():
        ...     async with httpx.AsyncClient() as client:
        ...         response = await retryable_request_async(
        ...             "https://api.example.com/data",
        ...             client.get,
        ...             retries=3,
        ...             retry_delay=0.1,
        ...             retry_on=[503],
        ...         )
        ...         return response.status_code
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    retry_config, transport_options = split_options(options, config)
    executor = AsyncRetryExecutor(retry_config)
    return await executor.execute(url, transport, **transport_options)
