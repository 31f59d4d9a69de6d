r"""Core shared logic for sync and async HTTP operations.

This module contains the parameter validation shared by the request
functions, the wrappers and the clients.
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

from aresfetch.core.validation import (
    validate_delay,
    validate_retry_delay,
    validate_retry_on,
    validate_retry_params,
    validate_timeout,
    validate_transport_errors,
)
