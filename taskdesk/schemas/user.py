"""
User Schemas - Pydantic models for request/response validation
"""

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, PlainSerializer, field_validator
from typing import Annotated, Optional
from datetime import datetime, timezone

from taskdesk.models.user import UserRole


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


# Rendered as "...+00:00" whatever the database backend
UTCDateTime = Annotated[
    datetime,
    AfterValidator(_as_utc),
    PlainSerializer(lambda v: v.isoformat(), return_type=str, when_used="json"),
]


class UserCreate(BaseModel):
    """Schema for user registration - requires password"""
    username: str  # Unique handle
    email: EmailStr  # Validates email format automatically
    password: str  # Plaintext password (hashed before storage)
    role: Optional[UserRole] = None  # Defaults to employee when omitted

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Ensure username is not empty or just whitespace"""
        if not v or not v.strip():
            raise ValueError("Username cannot be empty")
        return v.strip()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if not v:
            raise ValueError("Password cannot be empty")
        return v

    @field_validator("role", mode="before")
    @classmethod
    def blank_role(cls, v):
        return None if v == "" else v


class UserLogin(BaseModel):
    """Schema for login request"""
    email: EmailStr  # Normalised the same way as at registration
    password: str


class UserPublic(BaseModel):
    """User summary returned alongside a login token"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    role: UserRole


class UserResponse(BaseModel):
    """Schema for user listing - excludes the password hash"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    email: str
    role: UserRole
    created_at: UTCDateTime = Field(alias="createdAt")


class UserRef(BaseModel):
    """A referenced user resolved to its handle"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    username: str


class TokenResponse(BaseModel):
    """Schema for authentication token response"""
    token: str  # Signed session token
    user: UserPublic


class MessageResponse(BaseModel):
    message: str
