"""
Authentication API - User registration and login endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from taskdesk.database import get_db
from taskdesk.schemas import UserCreate, UserLogin, UserPublic, TokenResponse, MessageResponse
from taskdesk.core.config import Settings, get_settings
from taskdesk.core.security import issue_token
from taskdesk.services import credential_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new user account.

    No token is issued here; the client logs in afterwards.

    Raises:
        400: Username or email already registered
    """
    logger.info(f"➡️  Registration attempt for: {user_data.username}")
    credential_store.register_user(db, user_data, settings)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Authenticate a user and return a session token valid for 24 hours.

    Raises:
        400: Unknown email or wrong password
    """
    logger.info(f"➡️  Login attempt for email: {credentials.email}")

    user = credential_store.verify_credentials(db, credentials.email, credentials.password)
    token = issue_token(user, settings)

    logger.info(f"✅ Login successful: {user.username}")
    return TokenResponse(token=token, user=UserPublic.model_validate(user))
