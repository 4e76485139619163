"""
Idea Endpoints Module

This module provides CRUD endpoints for ideas. Every route is owner-scoped: users
only ever see and modify their own ideas; anything else is reported as not found.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from sparkboard.api import deps
from sparkboard.db.session import get_db
from sparkboard.models.user import User
from sparkboard.schemas.base import Message
from sparkboard.schemas.idea import IdeaConvert, IdeaCreate, IdeaRead, IdeaUpdate
from sparkboard.schemas.project import ProjectRead
from sparkboard.services import ideas as idea_service

router = APIRouter()


@router.get("", response_model=List[IdeaRead])
def list_ideas(
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Retrieve the current user's ideas, newest first.
    """
    return idea_service.list_ideas(db, current_user.id)


@router.post("", response_model=IdeaRead, status_code=status.HTTP_201_CREATED)
def create_idea(
    idea_in: IdeaCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Create a new idea owned by the current user.

    Status defaults to "Draft" and tags to an empty list.

    Raises:
        400: If the title is missing or blank
        409: If another idea already uses this title
    """
    return idea_service.create_idea(db, current_user.id, idea_in)


@router.get("/{idea_id}", response_model=IdeaRead)
def read_idea(
    idea_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Get a specific idea by ID.

    Raises:
        404: If the idea doesn't exist or belongs to another user
    """
    return idea_service.get_idea(db, idea_id, current_user.id)


@router.api_route("/{idea_id}", methods=["PUT", "PATCH"], response_model=IdeaRead)
def update_idea(
    idea_id: str,
    idea_in: IdeaUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Update an existing idea.

    PUT and PATCH behave the same: only the fields present in the body are
    changed. ``tags: null`` becomes an empty list and ``description: null``
    clears the description.

    Raises:
        400: If no fields are supplied
        404: If the idea doesn't exist or belongs to another user
        409: If the new title is already taken
    """
    return idea_service.update_idea(db, idea_id, current_user.id, idea_in)


@router.delete("/{idea_id}", response_model=Message)
def delete_idea(
    idea_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Delete an idea.

    Raises:
        404: If the idea doesn't exist or belongs to another user
    """
    idea_service.delete_idea(db, idea_id, current_user.id)
    return {"message": "Idea deleted successfully"}


@router.post("/{idea_id}/convert", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def convert_idea(
    idea_id: str,
    convert_in: Optional[IdeaConvert] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """
    Promote an idea into a project.

    The new project is named after the idea unless a name is given, references
    the idea through ``ideaId``, and the idea is marked "ConvertedToProject".

    Raises:
        404: If the idea doesn't exist or belongs to another user
        409: If a project with that name already exists
    """
    return idea_service.convert_idea_to_project(
        db, idea_id, current_user.id, convert_in or IdeaConvert()
    )
