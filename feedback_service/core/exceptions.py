"""Errors raised by handlers and rendered as ``{"error": message}``."""


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    message = "Server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateUserError(ServiceError):
    """Signup with a username or email that is already taken."""

    status_code = 400
    message = "User already exists"


class InvalidCredentialsError(ServiceError):
    """Unknown email or wrong password; the two are never told apart."""

    status_code = 400
    message = "Invalid credentials"


class NotAuthenticatedError(ServiceError):
    status_code = 401
    message = "Not authenticated"
