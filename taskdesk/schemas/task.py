"""
Task Schemas - Pydantic models for task and comment operations
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import date

from taskdesk.models.task import TaskStatus, TaskPriority
from taskdesk.schemas.user import UTCDateTime, UserRef


class TaskBase(BaseModel):
    """Fields a client may set on a task"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    deadline: Optional[date] = None
    assigned_to: Optional[str] = Field(None, alias="assignedTo")  # User id, not checked for existence

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        """Ensure title is not empty"""
        if not v or not v.strip():
            raise ValueError("Task title cannot be empty")
        return v.strip()

    @field_validator("priority", mode="before")
    @classmethod
    def default_priority(cls, v):
        return TaskPriority.MEDIUM if v in (None, "") else v

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        return TaskStatus.TODO if v in (None, "") else v

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, v):
        # Web forms send "" for no deadline; full timestamps keep only their date
        if v == "":
            return None
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v

    @field_validator("assigned_to", mode="before")
    @classmethod
    def blank_assignee(cls, v):
        return None if v == "" else v


class TaskCreate(TaskBase):
    """Schema for creating a new task"""


class TaskUpdate(TaskBase):
    """
    Schema for updating a task.

    Full replacement: omitted optional fields are cleared and omitted
    enums return to their defaults. The creator is never accepted.
    """


class CommentCreate(BaseModel):
    text: str


class _WireModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CommentResponse(_WireModel):
    id: str = Field(alias="_id")
    text: str
    author_id: str = Field(alias="user")
    created_at: UTCDateTime = Field(alias="createdAt")


class CommentDetailResponse(_WireModel):
    """Comment with its author resolved to a handle"""
    id: str = Field(alias="_id")
    text: str
    author: Optional[UserRef] = Field(None, alias="user")
    created_at: UTCDateTime = Field(alias="createdAt")


class TaskResponse(_WireModel):
    """Task as stored - references are raw user ids"""
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus
    deadline: Optional[date] = None
    assigned_to_id: Optional[str] = Field(None, alias="assignedTo")
    created_by_id: str = Field(alias="createdBy")
    comments: List[CommentResponse] = []
    created_at: UTCDateTime = Field(alias="createdAt")
    updated_at: UTCDateTime = Field(alias="updatedAt")


class TaskDetailResponse(_WireModel):
    """Task with assignee, creator and comment authors resolved to handles"""
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus
    deadline: Optional[date] = None
    assignee: Optional[UserRef] = Field(None, alias="assignedTo")
    creator: Optional[UserRef] = Field(None, alias="createdBy")
    comments: List[CommentDetailResponse] = []
    created_at: UTCDateTime = Field(alias="createdAt")
    updated_at: UTCDateTime = Field(alias="updatedAt")
