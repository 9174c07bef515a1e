"""kcadmin exceptions."""

from __future__ import annotations

from typing import Any, Optional


class KeycloakAdminError(Exception):
    """Base exception for all kcadmin errors."""


class LocalValidationError(KeycloakAdminError):
    """A required argument was missing. Raised before any request is sent."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TransportError(KeycloakAdminError):
    """The request could not be completed or the response could not be parsed."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Request failed: {cause}")


class ServerError(KeycloakAdminError):
    """The API answered with a status other than the one the operation expects."""

    def __init__(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        message = self.error_message
        super().__init__(f"[{status_code}] {message}" if message else f"[{status_code}]")

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.body, dict):
            for key in ("errorMessage", "error_description", "error"):
                value = self.body.get(key)
                if value:
                    return str(value)
            return None
        if isinstance(self.body, str) and self.body:
            return self.body
        return None


class BadRequestError(ServerError):
    """400 Bad Request."""

    def __init__(self, body: Any = None) -> None:
        super().__init__(400, body)


class AuthenticationError(ServerError):
    """401 Unauthorized."""

    def __init__(self, body: Any = None) -> None:
        super().__init__(401, body)


class ForbiddenError(ServerError):
    """403 Forbidden."""

    def __init__(self, body: Any = None) -> None:
        super().__init__(403, body)


class NotFoundError(ServerError):
    """404 Not Found."""

    def __init__(self, body: Any = None) -> None:
        super().__init__(404, body)


class ConflictError(ServerError):
    """409 Conflict."""

    def __init__(self, body: Any = None) -> None:
        super().__init__(409, body)
