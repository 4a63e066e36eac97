"""Error kinds raised by the core and services.

Each kind carries the HTTP status the API layer answers with; the services
never build responses themselves. One translator in
``coursehub.api.error_handlers`` turns these into JSON envelopes.
"""


class AppError(Exception):
    """Base class for expected, user-facing failures."""

    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed input or a violated business rule."""

    http_status = 400
    default_message = "Validation failed"


class DuplicateEmailError(ValidationError):
    """Email already belongs to another account."""

    default_message = "Email already registered"


class UnauthenticatedError(AppError):
    """Missing, invalid or expired credentials."""

    http_status = 401
    default_message = "Unauthorized"


class InvalidCredentialsError(UnauthenticatedError):
    """Login failed. Same message whether the email or the password was wrong."""

    default_message = "Invalid email or password"


class ForbiddenError(AppError):
    """Authenticated, but the role or ownership does not allow the action."""

    http_status = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    http_status = 404
    default_message = "Resource not found"


class InvalidTokenError(Exception):
    """Token signature, structure or expiry check failed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
