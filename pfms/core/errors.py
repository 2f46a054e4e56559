# pfms/core/errors.py
from fastapi import status


class ApiError(Exception):
    """Base error rendered as {"ok": false, "error": message}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFields(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing fields"


class InvalidFields(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid fields"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class NotAuthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class DbError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "DB error"
