"""
Schemas Package - Exports all Pydantic schemas
"""

from taskdesk.schemas.user import (
    UserCreate,
    UserLogin,
    UserPublic,
    UserResponse,
    UserRef,
    TokenResponse,
    MessageResponse,
)
from taskdesk.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskResponse,
    TaskDetailResponse,
    CommentCreate,
    CommentResponse,
    CommentDetailResponse,
)

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserPublic",
    "UserResponse",
    "UserRef",
    "TokenResponse",
    "MessageResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskDetailResponse",
    "CommentCreate",
    "CommentResponse",
    "CommentDetailResponse",
]
