"""
Gateway error taxonomy.

Every failure of a call against the link service is raised as a subclass of
GatewayError. Callers at the component boundary convert these into outcomes.
"""

from __future__ import annotations

from src.domain.entities import ErrorKind


class GatewayError(Exception):
    """Base class for link service failures."""

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message or self.kind.value)


class NetworkError(GatewayError):
    """Transport failure; no response was received."""

    kind = ErrorKind.NETWORK


class ServerError(GatewayError):
    """Non-2xx response without a more specific meaning."""

    kind = ErrorKind.SERVER


class InputValidationError(GatewayError):
    """The service rejected the request shape (HTTP 400)."""

    kind = ErrorKind.VALIDATION


class ConflictError(GatewayError):
    """The requested short code already exists (HTTP 409)."""

    kind = ErrorKind.CONFLICT


class NotFoundError(GatewayError):
    """No link exists for the requested code (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND
