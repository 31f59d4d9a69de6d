r"""Outcome of a single request attempt."""

from __future__ import annotations

__all__ = ["AttemptOutcome"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of one transport invocation.

    Exactly one of ``response`` and ``error`` is set.

    Attributes:
        response: The response returned by the transport, whatever its
            status code.
        error: The transport error raised instead of a response.
    """

    response: httpx.Response | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if (self.response is None) == (self.error is None):
            msg = "exactly one of response and error must be set"
            raise ValueError(msg)

    @property
    def status_code(self) -> int | None:
        """The response status code, or ``None`` for a transport
        error."""
        return None if self.response is None else self.response.status_code

    def settle(self) -> httpx.Response:
        """Return the response, or raise the transport error.

        Returns:
            The response of the attempt.

        Raises:
            Exception: The original transport error of the attempt.
        """
        if self.error is not None:
            raise self.error
        return self.response
