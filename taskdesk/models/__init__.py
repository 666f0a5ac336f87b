"""
Models Package - Exports all database models for easy importing
"""

# Import all models to register them with SQLAlchemy Base
from taskdesk.models.user import User, UserRole
from taskdesk.models.task import Task, TaskComment, TaskStatus, TaskPriority

__all__ = [
    "User",
    "UserRole",
    "Task",
    "TaskComment",
    "TaskStatus",
    "TaskPriority",
]
