"""
Tasks API - Task CRUD and comment endpoints
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
import logging

from taskdesk.database import get_db
from taskdesk.schemas import (
    TaskCreate,
    TaskUpdate,
    TaskResponse,
    TaskDetailResponse,
    CommentCreate,
    CommentDetailResponse,
    MessageResponse,
)
from taskdesk.core.dependencies import CurrentUser, get_current_user
from taskdesk.services import task_repository

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[TaskDetailResponse])
def get_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Get all tasks, newest first.

    Assignee and creator are resolved to {_id, username}. No filtering or paging.
    """
    logger.info(f"➡️  Get tasks request from: {current_user.username}")
    tasks = task_repository.list_tasks(db)
    logger.info(f"✅ Returning {len(tasks)} tasks")
    return [TaskDetailResponse.model_validate(task) for task in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Create a task owned by the caller.

    Omitted priority/status default to medium / To-Do. References in the
    response are raw user ids.
    """
    logger.info(f"➡️  Create task request from: {current_user.username}")
    task = task_repository.create_task(db, task_data, creator_id=current_user.id)
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskDetailResponse)
def get_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Get one task with assignee, creator and comment authors resolved.

    Raises:
        404: Task not found
    """
    logger.info(f"➡️  Get task {task_id} request from: {current_user.username}")
    task = task_repository.get_task(db, task_id)
    return TaskDetailResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Replace a task's title, description, priority, status, deadline and assignee.

    The payload is the full desired state: omitted optional fields are cleared.
    Creator and creation time never change.

    Raises:
        404: Task not found
    """
    logger.info(f"➡️  Update task {task_id} request from: {current_user.username}")
    task = task_repository.update_task(db, task_id, task_data)
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Delete a task and its comments.

    Raises:
        404: Task not found
    """
    logger.info(f"➡️  Delete task {task_id} request from: {current_user.username}")
    task_repository.delete_task(db, task_id)
    return MessageResponse(message="Task deleted successfully")


@router.post(
    "/{task_id}/comments",
    response_model=List[CommentDetailResponse],
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    task_id: str,
    comment: CommentCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Append a comment authored by the caller.

    Returns:
        The task's full comment list in insertion order, authors resolved

    Raises:
        404: Task not found
    """
    logger.info(f"➡️  Add comment to task {task_id} from: {current_user.username}")
    comments = task_repository.add_comment(db, task_id, comment.text, author_id=current_user.id)
    return [CommentDetailResponse.model_validate(c) for c in comments]
