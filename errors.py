"""
Domain errors of the booking service.

Services raise these; the HTTP layer turns each one into the flat
``{"code": ..., "message": ...}`` reply. ``message`` is always safe to show
to the client: storage driver text stays on the chained ``__cause__``.
"""

from http import HTTPStatus


class BookingError(Exception):
    """Base class for every failure the service reports to a caller."""

    message = "request failed"
    code = 1
    status = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_reply(self) -> dict:
        return {"code": self.code, "message": self.message}


class ParameterError(BookingError):
    """Request body is not JSON, not an object, or has a field of the wrong type."""

    message = "parameter error"


class AuthFailed(BookingError):
    """Token missing or unknown."""

    message = "authentication failed"


class NotFound(BookingError):
    message = "not found"


class DuplicateUsername(BookingError):
    message = "username already exists"


class InvalidCredential(BookingError):
    message = "invalid username or password"


class CreateFailed(BookingError):
    message = "create failed"


class UpdateFailed(BookingError):
    message = "update failed"


class TokenPersistError(BookingError):
    message = "could not issue token"


class SearchFailed(BookingError):
    message = "search failed"


class ProfileUpdateFailed(UpdateFailed):
    """Profile writes report code 2 with a server-error status."""

    message = "failed to update user info"
    code = 2
    status = HTTPStatus.INTERNAL_SERVER_ERROR
