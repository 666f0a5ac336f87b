"""
Task Model - Work items and their embedded comment thread
"""

from sqlalchemy import Column, String, Text, Date, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import enum

from taskdesk.database import Base
from taskdesk.utils.ids import generate_id, ID_LENGTH


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, enum.Enum):
    """Task status enumeration - tracks task lifecycle"""
    TODO = "To-Do"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On-Hold"


class TaskPriority(str, enum.Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Task(Base):
    """
    Task table - one row per work item.

    Comments belong to exactly one task and are removed with it
    (ORM cascade plus ON DELETE CASCADE, in the same transaction).
    """
    __tablename__ = "tasks"

    id = Column(String(ID_LENGTH), primary_key=True, default=generate_id)

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)

    status = Column(SQLEnum(TaskStatus, name="task_status"), default=TaskStatus.TODO, nullable=False, index=True)
    priority = Column(SQLEnum(TaskPriority, name="task_priority"), default=TaskPriority.MEDIUM, nullable=False)
    deadline = Column(Date, nullable=True)

    # assigned_to_id is not checked against users before storage
    assigned_to_id = Column(String(ID_LENGTH), ForeignKey("users.id"), nullable=True, index=True)
    created_by_id = Column(String(ID_LENGTH), ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    creator = relationship("User", foreign_keys=[created_by_id])
    assignee = relationship("User", foreign_keys=[assigned_to_id])
    comments = relationship(
        "TaskComment",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by=lambda: [TaskComment.created_at, TaskComment.id],  # ids alone only order within one worker
    )

    def __repr__(self):
        return f"<Task {self.id}: {self.title} ({self.status})>"


class TaskComment(Base):
    """Append-only comment on a task; the author is fixed at creation"""
    __tablename__ = "task_comments"

    id = Column(String(ID_LENGTH), primary_key=True, default=generate_id)
    task_id = Column(String(ID_LENGTH), ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(String(ID_LENGTH), ForeignKey("users.id"), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    task = relationship("Task", back_populates="comments")
    author = relationship("User")

    def __repr__(self):
        return f"<TaskComment {self.id} on task {self.task_id}>"
