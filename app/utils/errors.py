"""
Domain errors raised by the lifecycle services.

Routes never build HTTP responses for these by hand; the handlers registered
in app/main.py translate them.
"""


class HRError(Exception):
    """Base class for every error the services raise on purpose."""

    status_code = 500
    default_message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(HRError):
    status_code = 404
    default_message = "Record not found"


class Conflict(HRError):
    status_code = 400
    default_message = "Email address already exists."


class InvalidInput(HRError):
    status_code = 400
    default_message = "Invalid input"


class InvalidToken(HRError):
    status_code = 400
    default_message = "Password reset token is invalid or has expired."


class DependencyFailure(HRError):
    status_code = 500
    default_message = "A required service is unavailable. Please try again later."
