"""Domain errors raised by services and rendered as ``{"message": ...}``."""
from fastapi import status


class GymfluenceError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(GymfluenceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class Forbidden(GymfluenceError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class PrivateAccount(Forbidden):
    message = "Private account"


class NotFound(GymfluenceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InvalidOperation(GymfluenceError):
    message = "Invalid operation"


class InvalidNotification(GymfluenceError):
    message = "Invalid notification"
