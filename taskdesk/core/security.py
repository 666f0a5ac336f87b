"""
Security Module - Password hashing and session token issue/verification
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
import logging

from taskdesk.core.config import Settings
from taskdesk.core.exceptions import InvalidToken, MissingToken

logger = logging.getLogger(__name__)

# Cost factor used when the caller does not pass one
DEFAULT_BCRYPT_ROUNDS = 10


@lru_cache()
def get_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    """bcrypt hashing context for the given cost factor (one instance per cost)"""
    return CryptContext(
        schemes=["bcrypt"],  # bcrypt salts every hash automatically
        deprecated="auto",
        bcrypt__rounds=rounds,
    )


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash a plaintext password using bcrypt.

    Args:
        password: Plaintext password from the registration request
        rounds: bcrypt cost factor

    Returns:
        Salted hash string, safe to store (e.g. $2b$10$...)
    """
    return get_password_context(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plaintext password against a stored bcrypt hash.

    The cost factor is read from the hash itself, so any context can verify it.
    Comparison is constant-time (delegated to bcrypt).
    """
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"❌ Password verification error: {str(e)}")
        return False  # Corrupted hash - deny access


def create_access_token(
    claims: Dict[str, Any],
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed session token.

    Payload: {id, role, username, exp}
    Signature: HMAC(header + payload, SECRET_KEY)

    Args:
        claims: Identity claims to embed (id, role, username)
        settings: Provides the signing key, algorithm and default lifetime
        expires_delta: Optional custom lifetime

    Returns:
        Encoded JWT string
    """
    to_encode = dict(claims)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode["exp"] = expire

    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    logger.debug(f"✅ Created access token expiring at {expire}")
    return encoded_jwt


def issue_token(user, settings: Settings) -> str:
    """Issue a session token for a stored user"""
    role = user.role.value if hasattr(user.role, "value") else user.role
    return create_access_token(
        {"id": str(user.id), "role": role, "username": user.username},
        settings,
    )


def verify_token(token: Optional[str], settings: Settings) -> Dict[str, Any]:
    """
    Verify a session token and return its claims.

    Raises:
        MissingToken: No token supplied
        InvalidToken: Bad signature, malformed, expired or missing the id claim
    """
    if not token:
        raise MissingToken()

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],  # Only accept the configured algorithm
        )
    except jwt.ExpiredSignatureError:
        logger.warning("⚠️  Token expired")
        raise InvalidToken()
    except JWTError as e:
        logger.warning(f"⚠️  Invalid token: {str(e)}")
        raise InvalidToken()

    if not payload.get("id"):
        logger.warning("⚠️  Token has no id claim")
        raise InvalidToken()

    return payload
