"""
Task Service

Tasks are always addressed through their parent project, and the parent
project must belong to the caller.
"""
from typing import Dict, List, Optional

from sqlmodel import Session, select

from sparkboard.core.errors import NotFound, ValidationError
from sparkboard.core.log import logger
from sparkboard.models.task import Task, TaskStatus
from sparkboard.schemas.task import TaskCreate, TaskUpdate
from sparkboard.services.base import apply_changes, save
from sparkboard.services.projects import get_project

TASK_TITLE_CONFLICT = "A task with this title already exists in this project."

# Accepted spellings of each status, as sent by forms and API clients
TASK_STATUS_ALIASES: Dict[str, TaskStatus] = {
    "To Do": TaskStatus.TODO,
    "Todo": TaskStatus.TODO,
    "In Progress": TaskStatus.IN_PROGRESS,
    "InProgress": TaskStatus.IN_PROGRESS,
    "Done": TaskStatus.DONE,
    "Blocked": TaskStatus.BLOCKED,
}


def normalize_task_status(value: Optional[str]) -> str:
    """Map an incoming status label to its stored value, rejecting unknown labels."""
    status = TASK_STATUS_ALIASES.get(value) if isinstance(value, str) else None
    if status is None:
        raise ValidationError("Invalid Task Status")
    return status.value


def list_tasks(db: Session, project_id: str, owner_id: str) -> List[Task]:
    project = get_project(db, project_id, owner_id)
    statement = (
        select(Task)
        .where(Task.project_id == project.id)
        .order_by(Task.created_at.desc())
    )
    return list(db.exec(statement).all())


def get_task(db: Session, project_id: str, task_id: str, owner_id: str) -> Task:
    """
    Fetch a task of an owned project.

    A task that exists but belongs to a different project is reported as not found.
    """
    project = get_project(db, project_id, owner_id)
    task = db.exec(
        select(Task).where(Task.id == task_id, Task.project_id == project.id)
    ).first()
    if not task:
        logger.info("Task {} not found in project {}", task_id, project_id)
        raise NotFound("Task not found or does not belong to this project")
    return task


def create_task(db: Session, project_id: str, owner_id: str, task_in: TaskCreate) -> Task:
    project = get_project(db, project_id, owner_id)
    status = TaskStatus.TODO.value
    if task_in.status is not None:
        status = normalize_task_status(task_in.status)

    task = Task(
        project_id=project.id,
        title=task_in.title,
        description=task_in.description,
        status=status,
        due_date=task_in.due_date,
        assigned_to_id=task_in.assigned_to_id,
    )
    return save(db, task, TASK_TITLE_CONFLICT)


def update_task(
    db: Session, project_id: str, task_id: str, owner_id: str, task_in: TaskUpdate
) -> Task:
    """
    Apply a partial update to a task.

    Raises:
        ValidationError: If the body is empty or the status label is unknown
        NotFound: If the project is not owned by the caller or the task is not in it
        Conflict: If another task in the project already has the new title
    """
    changes = task_in.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("No fields provided for update")
    if "status" in changes:
        changes["status"] = normalize_task_status(changes["status"])

    task = get_task(db, project_id, task_id, owner_id)
    apply_changes(task, changes)
    return save(db, task, TASK_TITLE_CONFLICT)


def delete_task(db: Session, project_id: str, task_id: str, owner_id: str) -> None:
    task = get_task(db, project_id, task_id, owner_id)
    db.delete(task)
    db.commit()
    logger.info("Deleted task {} from project {}", task_id, project_id)
