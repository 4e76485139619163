"""
Task Endpoints Module

Tasks are nested under their project: /projects/{project_id}/tasks. Only the owner
of the parent project can list, read, create, update or delete its tasks.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from sparkboard.api import deps
from sparkboard.db.session import get_db
from sparkboard.models.user import User
from sparkboard.schemas.base import Message
from sparkboard.schemas.task import TaskCreate, TaskRead, TaskUpdate
from sparkboard.services import tasks as task_service

router = APIRouter()


@router.get("/{project_id}/tasks", response_model=List[TaskRead])
def list_tasks(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Retrieve all tasks of an owned project, newest first.
    """
    return task_service.list_tasks(db, project_id, current_user.id)


@router.post("/{project_id}/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    project_id: str,
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Create a task inside an owned project.

    Raises:
        400: If the title is missing or the status label is not recognised
        404: If the project doesn't exist or belongs to another user
        409: If the project already has a task with this title
    """
    return task_service.create_task(db, project_id, current_user.id, task_in)


@router.get("/{project_id}/tasks/{task_id}", response_model=TaskRead)
def read_task(
    project_id: str,
    task_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    return task_service.get_task(db, project_id, task_id, current_user.id)


@router.api_route("/{project_id}/tasks/{task_id}", methods=["PUT", "PATCH"], response_model=TaskRead)
def update_task(
    project_id: str,
    task_id: str,
    task_in: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Partially update a task.

    ``status`` accepts "To Do"/"Todo", "In Progress"/"InProgress", "Done" and
    "Blocked". ``dueDate: null`` clears the due date.
    """
    return task_service.update_task(db, project_id, task_id, current_user.id, task_in)


@router.delete("/{project_id}/tasks/{task_id}", response_model=Message)
def delete_task(
    project_id: str,
    task_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    task_service.delete_task(db, project_id, task_id, current_user.id)
    return {"message": "Task deleted successfully"}
