"""
Domain Exceptions - Failures raised by services and mapped to HTTP responses
"""

from fastapi import status


class TaskDeskError(Exception):
    """Base class for expected failures; carries the HTTP status to respond with"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskDeskError):
    """A required field is missing or a value is not acceptable"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class Conflict(TaskDeskError):
    """A unique field (username or email) is already taken"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentials(TaskDeskError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class MissingToken(TaskDeskError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied"


class InvalidToken(TaskDeskError):
    """Signature, format or expiration check failed"""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class NotFound(TaskDeskError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
