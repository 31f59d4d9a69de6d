r"""Default configurations for HTTP requests with automatic retry
logic."""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_TRANSPORT_ERRORS",
    "RETRY_OPTION_KEYS",
]

import httpx

# Default timeout in seconds used by the clients when creating httpx clients
DEFAULT_TIMEOUT = 10.0

# Default maximum number of retry attempts
# Total attempts = retries + 1 (initial attempt)
DEFAULT_RETRIES = 3

# Default fixed delay in seconds between two attempts
DEFAULT_RETRY_DELAY = 1.0

# Exceptions raised by the transport that count as a failed attempt.
# Anything else propagates immediately without being retried.
DEFAULT_TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.TransportError,)

# Keyword arguments consumed by the retry engine and never forwarded
# to the transport
RETRY_OPTION_KEYS = frozenset({"retries", "retry_delay", "retry_on", "transport_errors"})
