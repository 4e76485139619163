"""
Profile Endpoints Module

Lets the authenticated user read and update their own profile.
"""
from typing import Any
from fastapi import APIRouter, Depends
from sqlmodel import Session

from sparkboard.api import deps
from sparkboard.db.session import get_db
from sparkboard.models.user import User
from sparkboard.schemas.user import ProfileUpdate, UserRead
from sparkboard.services import users as user_service

router = APIRouter()


@router.get("", response_model=UserRead)
def read_profile(
    current_user: User = Depends(deps.get_current_user),
) -> Any:
    """
    Get the current authenticated user's profile (password excluded).
    """
    return current_user


@router.patch("", response_model=UserRead)
def update_profile(
    *,
    db: Session = Depends(get_db),
    profile_in: ProfileUpdate,
    current_user: User = Depends(deps.get_current_user),
) -> Any:
    """
    Update the current user's userName, bio and roles.

    Only fields present in the body are changed.
    """
    return user_service.update_profile(db, current_user, profile_in)
