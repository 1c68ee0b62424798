"""Error taxonomy shared by services and the HTTP layer.

Services raise these; the exception handlers in ``hotelbook.main`` turn them
into ``{"success": false, "status": ..., "message": ...}`` responses.
"""


class HotelBookError(Exception):
    """Base class for errors that map to an HTTP status."""

    status_code: int = 500
    default_message: str = "Something went wrong!"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HotelBookError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid input."


class AuthenticationError(HotelBookError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_message = "You are not authenticated!"


class AuthorizationError(HotelBookError):
    """Valid credentials without the privilege the route requires."""

    status_code = 403
    default_message = "You are not authorized!"


class NotFoundError(HotelBookError):
    """No record matches the requested id."""

    status_code = 404
    default_message = "Not found."


class ConflictError(HotelBookError):
    """Unique constraint violation (username or email already taken)."""

    status_code = 409
    default_message = "Resource already exists."


class InternalError(HotelBookError):
    """Store or unexpected failure. The message is safe to show to clients."""

    status_code = 500
