"""
Credential Store - Registers users and checks their credentials
"""

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
import logging

from taskdesk.core.config import Settings
from taskdesk.core.exceptions import Conflict, InvalidCredentials
from taskdesk.core.security import hash_password, verify_password
from taskdesk.models import User, UserRole
from taskdesk.schemas import UserCreate

logger = logging.getLogger(__name__)


def register_user(db: Session, user_data: UserCreate, settings: Settings) -> User:
    """
    Create a user after checking that neither username nor email is taken.

    The password is stored only as a salted bcrypt hash.

    Raises:
        Conflict: Username or email already registered
    """
    existing_user = db.query(User).filter(
        or_(User.email == user_data.email, User.username == user_data.username)
    ).first()
    if existing_user:
        logger.warning(f"⚠️  Registration failed - user already exists: {user_data.username} / {user_data.email}")
        raise Conflict("User already exists")

    new_user = User(
        username=user_data.username,
        email=user_data.email,
        password_hash=hash_password(user_data.password, settings.BCRYPT_ROUNDS),
        role=user_data.role or UserRole.EMPLOYEE,
    )

    try:
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except IntegrityError:
        # Lost a race with a concurrent registration for the same username/email
        db.rollback()
        logger.warning(f"⚠️  Registration hit a uniqueness constraint: {user_data.email}")
        raise Conflict("User already exists")
    except Exception:
        db.rollback()
        raise

    logger.info(f"✅ User registered: {new_user.username} ({new_user.role.value})")
    return new_user


def verify_credentials(db: Session, email: str, password: str) -> User:
    """
    Look a user up by email and check the password.

    Unknown email and wrong password fail the same way.

    Raises:
        InvalidCredentials
    """
    user = db.query(User).filter(User.email == email).first()
    if not user:
        logger.warning(f"⚠️  Login failed - user not found: {email}")
        raise InvalidCredentials()

    if not verify_password(password, user.password_hash):
        logger.warning(f"⚠️  Login failed - incorrect password: {email}")
        raise InvalidCredentials()

    return user


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at, User.id).all()
