r"""Request issuer performing exactly one transport call per attempt."""

from __future__ import annotations

__all__ = ["issue", "issue_async"]

import logging
from typing import TYPE_CHECKING, Any

from aresfetch.retry.outcome import AttemptOutcome

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def issue(
    transport: Callable[..., httpx.Response],
    url: str,
    options: dict[str, Any],
    transport_errors: tuple[type[Exception], ...],
    *,
    buffer: bool = False,
) -> AttemptOutcome:
    """Invoke the transport once.

    Args:
        transport: The function performing the HTTP request. It is called
            as ``transport(url=url, **options)``.
        url: The URL to send the request to.
        options: Keyword arguments forwarded to the transport. They must
            not contain retry options.
        transport_errors: Exception types that turn into a failed outcome.
        buffer: If ``True``, the response body is read before returning so
            it can be read again by both a retry predicate and the caller.

    Returns:
        The outcome of the attempt.

    Raises:
        Exception: Any exception of the transport not listed in
            ``transport_errors``.
    """
    try:
        response = transport(url=url, **options)
        if buffer:
            response.read()
    except transport_errors as exc:
        logger.debug(f"Request to {url} failed with {type(exc).__name__}: {exc}")
        return AttemptOutcome(error=exc)
    logger.debug(f"Request to {url} returned status {response.status_code}")
    return AttemptOutcome(response=response)


async def issue_async(
    transport: Callable[..., Awaitable[httpx.Response]],
    url: str,
    options: dict[str, Any],
    transport_errors: tuple[type[Exception], ...],
    *,
    buffer: bool = False,
) -> AttemptOutcome:
    """Invoke the async transport once.

    Args:
        transport: The async function performing the HTTP request. It is
            called as ``transport(url=url, **options)``.
        url: The URL to send the request to.
        options: Keyword arguments forwarded to the transport. They must
            not contain retry options.
        transport_errors: Exception types that turn into a failed outcome.
        buffer: If ``True``, the response body is read before returning so
            it can be read again by both a retry predicate and the caller.

    Returns:
        The outcome of the attempt.

    Raises:
        Exception: Any exception of the transport not listed in
            ``transport_errors``.
    """
    try:
        response = await transport(url=url, **options)
        if buffer:
            await response.aread()
    except transport_errors as exc:
        logger.debug(f"Request to {url} failed with {type(exc).__name__}: {exc}")
        return AttemptOutcome(error=exc)
    logger.debug(f"Request to {url} returned status {response.status_code}")
    return AttemptOutcome(response=response)
