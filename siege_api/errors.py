from __future__ import annotations

from typing import Any


class SiegeClientError(RuntimeError):
    """Base class for every failure surfaced by the client."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class InvalidCredentials(SiegeClientError):
    """The session endpoint rejected the Basic-auth exchange.

    Ubisoft answers every rejection with the same family of 4xx codes, so a
    wrong password cannot be told apart from other refusals.
    """


InvalidPassword = InvalidCredentials


class ServiceConnectionError(SiegeClientError):
    """DNS, TCP, TLS or timeout failure before a response was received."""


class UnexpectedResponse(SiegeClientError):
    """The upstream service answered with something we could not use."""
