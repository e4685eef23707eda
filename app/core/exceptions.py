"""Application error taxonomy. Each error maps to one HTTP status."""


class AppError(Exception):
    """Base for errors rendered as {"error": message} with a fixed status."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed required fields."""

    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(AppError):
    """Missing, invalid or expired credential."""

    status_code = 401
    default_message = "Not authenticated"


class Forbidden(AppError):
    """Authenticated, but not the owner of the entity."""

    status_code = 403
    default_message = "Forbidden"


class NotFound(AppError):
    """Entity absent or not visible to the caller."""

    status_code = 404
    default_message = "Not found"


class InternalError(AppError):
    status_code = 500
