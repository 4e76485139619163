"""
Project Endpoints Module

This module provides CRUD endpoints for managing projects. Projects are owner-scoped:
users can only see and modify the projects they own.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from sparkboard.api import deps
from sparkboard.db.session import get_db
from sparkboard.models.user import User
from sparkboard.schemas.base import Message
from sparkboard.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from sparkboard.services import projects as project_service

router = APIRouter()


@router.get("", response_model=List[ProjectRead])
def list_projects(
    response: Response,
    pagination: deps.Pagination = Depends(deps.get_pagination),
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Retrieve a page of the current user's projects, newest first.

    Query parameters ``page`` and ``pageSize`` default to 1 and 10. The body is
    the list of projects; paging metadata is returned in the X-Total-Count,
    X-Page, X-Page-Size and X-Has-More headers.
    """
    result = project_service.list_projects(
        db, current_user.id, pagination.page, pagination.page_size
    )
    response.headers["X-Total-Count"] = str(result.total)
    response.headers["X-Page"] = str(result.page)
    response.headers["X-Page-Size"] = str(result.page_size)
    response.headers["X-Has-More"] = "true" if result.has_more else "false"
    return result.items


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    project_in: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Create a new project owned by the current user.

    Raises:
        400: If the name is missing, the budget is negative or the dates are inverted
        404: If ideaId does not reference one of the user's ideas
        409: If a project with this name already exists
    """
    return project_service.create_project(db, current_user.id, project_in)


@router.get("/{project_id}", response_model=ProjectRead)
def read_project(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Get a specific project by ID.

    Raises:
        404: If the project doesn't exist or belongs to another user
    """
    return project_service.get_project(db, project_id, current_user.id)


@router.api_route("/{project_id}", methods=["PUT", "PATCH"], response_model=ProjectRead)
def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Update an existing project; only the fields present in the body change.

    Raises:
        404: If the project doesn't exist or belongs to another user
        409: If the new name is already taken
    """
    return project_service.update_project(db, project_id, current_user.id, project_in)


@router.delete("/{project_id}", response_model=Message)
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Delete a project and all of its tasks.

    Raises:
        404: If the project doesn't exist or belongs to another user
    """
    project_service.delete_project(db, project_id, current_user.id)
    return {"message": "Project deleted successfully"}
