"""
Analytics Endpoints Module

Cross-user aggregates. These read every user's data, so they are restricted to admins.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from sparkboard.api import deps
from sparkboard.db.session import get_db
from sparkboard.models.user import User, UserRole
from sparkboard.schemas.analytics import StatusCount
from sparkboard.services import analytics as analytics_service

router = APIRouter()


@router.get("/ideas-by-status", response_model=List[StatusCount])
def ideas_by_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(deps.RoleChecker([UserRole.ADMIN])),
):
    """
    Count all ideas per status.

    Raises:
        401: If the request is not authenticated
        403: If the user is not an admin
    """
    return analytics_service.ideas_by_status(db)
