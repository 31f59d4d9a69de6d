r"""Parameter validation utilities for HTTP request retry logic.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the first request is sent.
"""

from __future__ import annotations

__all__ = [
    "validate_delay",
    "validate_retry_delay",
    "validate_retry_on",
    "validate_retry_params",
    "validate_timeout",
    "validate_transport_errors",
]

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from aresfetch.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_delay(delay: Any) -> None:
    """Validate a delay value in seconds.

    Args:
        delay: The delay to validate. Must be a non-negative number.

    Raises:
        TypeError: If delay is not a number.
        ValueError: If delay is negative.
    """
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        msg = f"retry delay must be a number, got {type(delay).__name__}"
        raise TypeError(msg)
    if delay < 0:
        msg = f"retry delay must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_retry_delay(retry_delay: Any) -> None:
    """Validate the ``retry_delay`` parameter.

    Args:
        retry_delay: Either a non-negative number of seconds or a callable
            computing the delay from ``(attempt, error, response)``.

    Raises:
        TypeError: If retry_delay is neither a number nor a callable.
        ValueError: If retry_delay is a negative number.
    """
    if callable(retry_delay):
        return
    validate_delay(retry_delay)


def validate_retry_on(retry_on: Any) -> None:
    """Validate the ``retry_on`` parameter.

    Args:
        retry_on: ``None``, a callable decision function, or a collection
            of HTTP status codes.

    Raises:
        TypeError: If retry_on is a string, a non-iterable, or contains
            something else than integers.

    Example:
        ```pycon
        >>> from aresfetch.core.validation import validate_retry_on
        >>> validate_retry_on(None)
        >>> validate_retry_on([503, 504])
        >>> validate_retry_on(lambda attempt, error, response: False)
        >>> validate_retry_on("503")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: retry_on must be a callable or a collection of status codes, got str

        ```
    """
    if retry_on is None or callable(retry_on):
        return
    if isinstance(retry_on, (str, bytes)) or not isinstance(retry_on, Iterable):
        msg = (
            "retry_on must be a callable or a collection of status codes, "
            f"got {type(retry_on).__name__}"
        )
        raise TypeError(msg)
    for status_code in retry_on:
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            msg = f"retry_on status codes must be integers, got {status_code!r}"
            raise TypeError(msg)


def validate_transport_errors(transport_errors: Any) -> None:
    """Validate the ``transport_errors`` parameter.

    Args:
        transport_errors: Tuple of exception types treated as transport
            failures.

    Raises:
        TypeError: If transport_errors is not a tuple of exception types.
    """
    if not isinstance(transport_errors, tuple) or not all(
        isinstance(exc_type, type) and issubclass(exc_type, BaseException)
        for exc_type in transport_errors
    ):
        msg = f"transport_errors must be a tuple of exception types, got {transport_errors!r}"
        raise TypeError(msg)


def validate_retry_params(
    retries: int,
    retry_delay: Any = 0.0,
    retry_on: Any = None,
) -> None:
    """Validate retry parameters.

    Args:
        retries: Maximum number of retry attempts for failed requests.
            Must be >= 0. A value of 0 means no retries (only the initial attempt).
        retry_delay: Delay in seconds between attempts, or a callable
            returning it. Must be >= 0 if provided as a number.
        retry_on: ``None``, a collection of status codes, or a callable
            decision function.

    Raises:
        TypeError: If a parameter has the wrong kind.
        ValueError: If retries or retry_delay are negative.

    Example:
        ```pycon
        >>> from aresfetch.core import validate_retry_params
        >>> validate_retry_params(retries=3)
        >>> validate_retry_params(retries=3, retry_delay=0.5, retry_on=[503])
        >>> validate_retry_params(retries=-1)  # doctest: +SKIP

        ```
    """
    if isinstance(retries, bool) or not isinstance(retries, int):
        msg = f"retries must be an integer, got {type(retries).__name__}"
        raise TypeError(msg)
    if retries < 0:
        msg = f"retries must be >= 0, got {retries}"
        raise ValueError(msg)
    validate_retry_delay(retry_delay)
    validate_retry_on(retry_on)
