"""
User Model - Represents registered users in the system
"""

from sqlalchemy import Column, String, DateTime, Enum as SQLEnum
from datetime import datetime, timezone
import enum

from taskdesk.database import Base
from taskdesk.utils.ids import generate_id, ID_LENGTH


class UserRole(str, enum.Enum):
    """User role enumeration - carried in tokens, not enforced on any route"""
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class User(Base):
    """
    User table - stores identity and the bcrypt hash of the password.
    The hash never leaves the server.
    """
    __tablename__ = "users"

    id = Column(String(ID_LENGTH), primary_key=True, default=generate_id)

    # Identity - both unique
    username = Column(String(150), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)

    password_hash = Column(String(255), nullable=False)

    role = Column(SQLEnum(UserRole, name="user_role"), default=UserRole.EMPLOYEE, nullable=False)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
