r"""Configuration dataclass for retry behavior.

This module provides the immutable configuration object of one logical
call, and the helper that separates the retry options from the options
forwarded to the transport.
"""

from __future__ import annotations

__all__ = ["RetryConfig", "split_options"]

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aresfetch.config import (
    DEFAULT_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TRANSPORT_ERRORS,
    RETRY_OPTION_KEYS,
)
from aresfetch.core.validation import validate_retry_params, validate_transport_errors

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    DelayFunc = Callable[[int, Exception | None, httpx.Response | None], float]
    RetryOnFunc = Callable[
        [int, Exception | None, httpx.Response | None], bool | Awaitable[bool]
    ]


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    A collection of status codes given as ``retry_on`` is stored as a
    tuple so the configuration stays immutable. Use
    ``dataclasses.replace`` to derive a configuration with some fields
    changed, including ``retry_on=None``.

    Attributes:
        retries: Maximum number of retry attempts. Must be >= 0.
        retry_delay: Delay in seconds between attempts, or a callable
            ``(attempt, error, response) -> float``.
        retry_on: ``None`` to retry only on transport failures, a
            collection of retryable status codes, or a decision callable
            ``(attempt, error, response) -> bool`` that may be async.
        transport_errors: Exception types raised by the transport that
            count as a failed attempt.

    Example:
        ```pycon
        >>> from aresfetch.retry import RetryConfig
        >>> config = RetryConfig(retries=2, retry_on=[503])
        >>> config.retry_on
        (503,)
        >>> from dataclasses import replace
        >>> replace(config, retry_on=None).retry_on is None
        True

        ```
    """

    retries: int = DEFAULT_RETRIES
    retry_delay: float | DelayFunc = DEFAULT_RETRY_DELAY
    retry_on: tuple[int, ...] | RetryOnFunc | None = None
    transport_errors: tuple[type[Exception], ...] = DEFAULT_TRANSPORT_ERRORS

    def __post_init__(self) -> None:
        if (
            not callable(self.retry_on)
            and isinstance(self.retry_on, Iterable)
            and not isinstance(self.retry_on, (str, bytes))
        ):
            object.__setattr__(self, "retry_on", tuple(self.retry_on))
        validate_retry_params(
            retries=self.retries, retry_delay=self.retry_delay, retry_on=self.retry_on
        )
        validate_transport_errors(self.transport_errors)

    @property
    def max_attempts(self) -> int:
        """The maximum number of transport invocations."""
        return self.retries + 1


def split_options(
    options: dict[str, Any], defaults: RetryConfig | None = None
) -> tuple[RetryConfig, dict[str, Any]]:
    """Split call options into the retry configuration and the
    transport options.

    The input mapping is left untouched.

    Args:
        options: The keyword arguments of one call.
        defaults: Optional configuration providing the values of the
            retry keys absent from ``options``.

    Returns:
        A tuple ``(config, transport_options)``.

    Raises:
        TypeError: If a retry option has the wrong kind.
        ValueError: If a retry option is out of range.

    Example:
        ```pycon
        >>> from aresfetch.retry import split_options
        >>> config, transport_options = split_options(
        ...     {"retries": 1, "retry_on": (503,), "timeout": 5.0}
        ... )
        >>> config.retries, config.retry_on
        (1, (503,))
        >>> transport_options
        {'timeout': 5.0}

        ```
    """
    retry_options = {k: v for k, v in options.items() if k in RETRY_OPTION_KEYS}
    transport_options = {k: v for k, v in options.items() if k not in RETRY_OPTION_KEYS}
    if defaults is None:
        return RetryConfig(**retry_options), transport_options
    return replace(defaults, **retry_options), transport_options
