from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested page or asset is not found."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when a request body fails validation."""


class ControllerError(Exception):
    """Base class for failed calls to the UniFi controller.

    Carries the HTTP status and raw response body (if any) for diagnostics.
    Never shown to guests.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class LoginFailedError(ControllerError):
    """Raised when the controller rejects or cannot complete the login step."""


class AuthorizationFailedError(ControllerError):
    """Raised when the controller rejects or cannot complete the authorize-guest command."""


class PersistenceError(Exception):
    """Raised when an audit record cannot be written."""
