"""Domain errors raised by the services and mapped to HTTP responses."""

from fastapi import status


class MyCapError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(MyCapError):
    """Malformed or missing input, or an unknown enum value."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(MyCapError):
    """Wrong password or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(MyCapError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(MyCapError):
    """Duplicate email, username or group admin."""

    status_code = status.HTTP_400_BAD_REQUEST


class QuotaExceededError(MyCapError):
    """The user has already used up this month's time quota."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnavailableError(MyCapError):
    """The data store could not be reached or failed mid-operation."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
