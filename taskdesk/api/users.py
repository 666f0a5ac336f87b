"""
Users API - User directory for assignment pickers
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
import logging

from taskdesk.database import get_db
from taskdesk.schemas import UserResponse
from taskdesk.core.dependencies import CurrentUser, get_current_user
from taskdesk.services import credential_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[UserResponse])
def get_all_users(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List every user without password hashes. Any authenticated user may call this."""
    logger.info(f"➡️  Get all users request from: {current_user.username}")

    users = credential_store.list_users(db)

    logger.info(f"✅ Returning {len(users)} users")
    return [UserResponse.model_validate(user) for user in users]
