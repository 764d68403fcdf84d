"""
Error taxonomy raised by the services and rendered by the routes.
"""

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input. Raised before any write."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    """A foreign key reference the storage layer rejected."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid reference provided"


class StorageError(AppError):
    default_message = "Database error"
