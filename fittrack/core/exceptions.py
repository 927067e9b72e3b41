"""Typed application errors. Each maps to one HTTP status and a {"message": ...} body."""


class AppError(Exception):
    """Base for errors the API reports to callers as-is."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "User not authorized"


class ValidationFailedError(AppError):
    status_code = 400
    default_message = "Validation failed"


class AuthenticationError(AppError):
    status_code = 401
    default_message = "Token is not valid"
