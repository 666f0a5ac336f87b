"""
Core Package - Configuration, security, and errors

IMPORTANT: Only import config, exceptions and security here.
Dependencies must be imported directly to avoid circular imports.
"""

from taskdesk.core.config import settings, get_settings, Settings
from taskdesk.core.exceptions import (
    TaskDeskError,
    ValidationError,
    Conflict,
    InvalidCredentials,
    MissingToken,
    InvalidToken,
    NotFound,
)
from taskdesk.core.security import hash_password, verify_password, create_access_token, issue_token, verify_token

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "TaskDeskError",
    "ValidationError",
    "Conflict",
    "InvalidCredentials",
    "MissingToken",
    "InvalidToken",
    "NotFound",
    "hash_password",
    "verify_password",
    "create_access_token",
    "issue_token",
    "verify_token",
]
