"""Domain errors shared by repositories, services and the API."""


class AppError(Exception):
    """Base error with a short client-facing message."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Resource not found."""

    status_code = 404
    default_message = "Resource not found"


class ValidationError(AppError):
    """Validation error."""

    status_code = 400
    default_message = "Validation error"


class AuthError(AppError):
    """Missing or invalid admin credentials."""

    status_code = 401
    default_message = "Unauthorized"


class StorageError(AppError):
    """Backing store read/write failure."""

    status_code = 500
    default_message = "Storage error"
