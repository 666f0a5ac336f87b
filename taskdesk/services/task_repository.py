"""
Task Repository - Persistence operations for tasks and their comments
"""

from sqlalchemy.orm import Session, selectinload
from typing import List
import logging

from taskdesk.core.exceptions import NotFound, ValidationError
from taskdesk.models import Task, TaskComment
from taskdesk.models.task import utcnow
from taskdesk.schemas import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

# Fields a client may write; everything else (creator, timestamps, comments) is server-owned
WRITABLE_FIELDS = ("title", "description", "priority", "status", "deadline")


def _with_references(query):
    """Eager-load assignee, creator and comment authors"""
    return query.options(
        selectinload(Task.assignee),
        selectinload(Task.creator),
        selectinload(Task.comments).selectinload(TaskComment.author),
    )


def _get_or_404(db: Session, task_id: str, resolve: bool = False) -> Task:
    query = db.query(Task)
    if resolve:
        query = _with_references(query)
    task = query.filter(Task.id == task_id).first()
    if not task:
        logger.warning(f"⚠️  Task {task_id} not found")
        raise NotFound("Task not found")
    return task


def _require_title(task_data) -> None:
    if not task_data.title or not task_data.title.strip():
        raise ValidationError("Task title is required")


def list_tasks(db: Session) -> List[Task]:
    """All tasks, newest first, with references loaded"""
    return _with_references(db.query(Task)).order_by(Task.created_at.desc(), Task.id.desc()).all()


def create_task(db: Session, task_data: TaskCreate, creator_id: str) -> Task:
    """Insert a task; the creator is always the authenticated caller"""
    _require_title(task_data)
    task = Task(
        title=task_data.title,
        description=task_data.description,
        priority=task_data.priority,
        status=task_data.status,
        deadline=task_data.deadline,
        assigned_to_id=task_data.assigned_to,
        created_by_id=creator_id,
    )

    try:
        db.add(task)
        db.commit()
        db.refresh(task)
    except Exception:
        db.rollback()
        raise

    logger.info(f"✅ Task {task.id} created by {creator_id}")
    return task


def get_task(db: Session, task_id: str) -> Task:
    """
    Fetch one task with its references resolved.

    Raises:
        NotFound: No task with this id
    """
    return _get_or_404(db, task_id, resolve=True)


def update_task(db: Session, task_id: str, task_data: TaskUpdate) -> Task:
    """
    Replace the writable fields of a task with the supplied state.

    Fields the client omitted are cleared (or reset to their default);
    creator, creation time and comments are never touched.

    Raises:
        ValidationError: Title missing
        NotFound: No task with this id
    """
    _require_title(task_data)
    task = _get_or_404(db, task_id)

    for field in WRITABLE_FIELDS:
        setattr(task, field, getattr(task_data, field))
    task.assigned_to_id = task_data.assigned_to
    task.updated_at = utcnow()

    try:
        db.commit()
        db.refresh(task)
    except Exception:
        db.rollback()
        raise

    logger.info(f"✅ Task {task_id} updated")
    return task


def delete_task(db: Session, task_id: str) -> None:
    """
    Remove a task together with its comments in one transaction.

    Raises:
        NotFound: No task with this id
    """
    task = _get_or_404(db, task_id)

    try:
        db.delete(task)  # Cascades to the comment rows
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"✅ Task {task_id} deleted")


def add_comment(db: Session, task_id: str, text: str, author_id: str) -> List[TaskComment]:
    """
    Append a comment by the caller and return the whole thread in order.

    Raises:
        NotFound: No task with this id (nothing is written)
    """
    task = _get_or_404(db, task_id)

    task.comments.append(TaskComment(text=text, author_id=author_id))
    task.updated_at = utcnow()

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"✅ Comment added to task {task_id} by {author_id}")
    return _get_or_404(db, task_id, resolve=True).comments
