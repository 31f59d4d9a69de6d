r"""Contains the blocking request function with automatic retry
logic."""

from __future__ import annotations

__all__ = ["retryable_request"]

from typing import TYPE_CHECKING, Any

from aresfetch.retry import RetryExecutor, split_options

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from aresfetch.retry import RetryConfig


def retryable_request(
    url: str,
    transport: Callable[..., httpx.Response],
    *,
    config: RetryConfig | None = None,
    **options: Any,
) -> httpx.Response:
    """Perform an HTTP request with automatic retry logic.

    Blocking twin of ``retryable_request_async``: it waits with
    ``time.sleep`` between attempts, and a ``retry_on`` callable must
    return a plain boolean.

    Args:
        url: The URL to send the request to.
        transport: The function performing one HTTP request (e.g.,
            client.get). It is called as
            ``transport(url=url, **transport_options)``.
        config: Optional RetryConfig providing the retry options absent
            from ``options``.
        **options: Retry options (``retries``, ``retry_delay``,
            ``retry_on``, ``transport_errors``) and any other keyword
            argument, which is forwarded to the transport.

    Returns:
        The response of the last attempt.

    Raises:
        TypeError: If a retry option has the wrong kind, or if retry_on
            returns an awaitable.
        ValueError: If a retry option is out of range.
        Exception: The transport error of the last attempt, or the
            exception raised by a retry_on or retry_delay callable.

    Example:
        ```pycon
        >>> import httpx
        >>> from aresfetch import retryable_request
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     response = retryable_request(
        ...         "https://api.example.com/data", client.get, retry_on=[503]
        ...     )
        ...

        ```
    """
    retry_config, transport_options = split_options(options, config)
    executor = RetryExecutor(retry_config)
    return executor.execute(url, transport, **transport_options)
