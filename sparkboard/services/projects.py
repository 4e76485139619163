"""
Project Service

Owner-scoped CRUD for projects with offset pagination.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from sparkboard.core.errors import NotFound, ValidationError
from sparkboard.core.log import logger
from sparkboard.models.idea import Idea
from sparkboard.models.project import Project, ProjectStatus
from sparkboard.models.task import Task
from sparkboard.schemas.project import ProjectCreate, ProjectUpdate, timeline_is_inverted
from sparkboard.services.base import apply_changes, save

PROJECT_NAME_CONFLICT = "A project with this name already exists."


@dataclass
class ProjectPage:
    items: List[Project]
    page: int
    page_size: int
    total: int

    @property
    def has_more(self) -> bool:
        return (self.page - 1) * self.page_size + len(self.items) < self.total


def list_projects(db: Session, owner_id: str, page: int, page_size: int) -> ProjectPage:
    """Return one page of the owner's projects, newest first."""
    skip = (page - 1) * page_size
    statement = (
        select(Project)
        .where(Project.owner_id == owner_id)
        .order_by(Project.created_at.desc())
        .offset(skip)
        .limit(page_size)
    )
    items = list(db.exec(statement).all())
    total = db.exec(
        select(func.count()).select_from(Project).where(Project.owner_id == owner_id)
    ).one()
    return ProjectPage(items=items, page=page, page_size=page_size, total=total)


def get_project(db: Session, project_id: str, owner_id: str) -> Project:
    project = db.exec(
        select(Project).where(Project.id == project_id, Project.owner_id == owner_id)
    ).first()
    if not project:
        logger.info("Project {} not found for user {}", project_id, owner_id)
        raise NotFound("Project not found")
    return project


def _check_source_idea(db: Session, idea_id: Optional[str], owner_id: str) -> None:
    # The idea's status is left untouched; only existence and ownership are checked
    if idea_id is None:
        return
    idea = db.exec(select(Idea).where(Idea.id == idea_id, Idea.user_id == owner_id)).first()
    if not idea:
        raise NotFound("Idea not found")


def _check_timeline(start_date: Optional[datetime], end_date: Optional[datetime]) -> None:
    if timeline_is_inverted(start_date, end_date):
        raise ValidationError("End date cannot be before start date")


def create_project(db: Session, owner_id: str, project_in: ProjectCreate) -> Project:
    _check_source_idea(db, project_in.idea_id, owner_id)
    project = Project(
        name=project_in.name,
        description=project_in.description,
        status=(project_in.status or ProjectStatus.PLANNING).value,
        owner_id=owner_id,
        assigned_to_user_ids=project_in.assigned_to_user_ids or [],
        start_date=project_in.start_date,
        end_date=project_in.end_date,
        budget=project_in.budget,
        idea_id=project_in.idea_id,
    )
    return save(db, project, PROJECT_NAME_CONFLICT)


def update_project(db: Session, project_id: str, owner_id: str, project_in: ProjectUpdate) -> Project:
    """
    Apply a partial update to an owned project.

    Raises:
        ValidationError: If the body is empty or the resulting timeline is inverted
        NotFound: If the project (or a newly referenced idea) is not owned by the caller
        Conflict: If the new name is already taken
    """
    changes = project_in.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("No fields provided for update")
    if "status" in changes:
        changes["status"] = ProjectStatus(changes["status"]).value

    project = get_project(db, project_id, owner_id)
    if "idea_id" in changes:
        _check_source_idea(db, changes["idea_id"], owner_id)
    _check_timeline(
        changes.get("start_date", project.start_date),
        changes.get("end_date", project.end_date),
    )

    apply_changes(project, changes)
    return save(db, project, PROJECT_NAME_CONFLICT)


def delete_project(db: Session, project_id: str, owner_id: str) -> None:
    """Delete an owned project together with its tasks."""
    project = get_project(db, project_id, owner_id)
    for task in db.exec(select(Task).where(Task.project_id == project.id)).all():
        db.delete(task)
    db.flush()
    db.delete(project)
    db.commit()
    logger.info("Deleted project {}", project_id)
