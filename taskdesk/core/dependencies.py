"""
FastAPI Dependencies - Authorization gate for protected endpoints
"""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Any, Dict, Optional
import logging

from taskdesk.core.config import Settings, get_settings
from taskdesk.core.security import verify_token

logger = logging.getLogger(__name__)

# Expects "Authorization: Bearer <token>"; missing tokens are reported by us, not by FastAPI
security = HTTPBearer(auto_error=False)


class CurrentUser:
    """Identity taken from a verified token (id, role, username)"""

    def __init__(self, id: str, role: Optional[str], username: Optional[str]):
        self.id = id
        self.role = role
        self.username = username

    def __repr__(self):
        return f"CurrentUser(id={self.id}, username={self.username}, role={self.role})"

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "CurrentUser":
        return cls(
            id=str(claims["id"]),
            role=claims.get("role"),
            username=claims.get("username"),
        )


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    Dependency that authenticates the caller from the bearer token.

    The identity is also attached to request.state.user. Roles are carried
    but not checked: any authenticated user may use every task endpoint.

    Raises:
        MissingToken (401): No bearer token in the request
        InvalidToken (403): Token signature or expiration check failed
    """
    token = credentials.credentials if credentials else None
    claims = verify_token(token, settings)

    current_user = CurrentUser.from_claims(claims)
    request.state.user = current_user
    logger.debug(f"✅ Authenticated user: {current_user.username}")
    return current_user


# Every route under these prefixes depends on get_current_user
PROTECTED_PREFIXES = ("/api/tasks", "/api/users")


async def check_request_token(request: Request, settings: Settings) -> None:
    """
    Run the bearer token check outside the dependency chain.

    Used when FastAPI rejects a request body before get_current_user runs,
    so unauthenticated callers still see 401/403 rather than 400.
    """
    if not request.url.path.startswith(PROTECTED_PREFIXES):
        return
    credentials = await security(request)
    verify_token(credentials.credentials if credentials else None, settings)
