from datetime import datetime
from typing import Optional

from pydantic import field_validator

from sparkboard.models.task import TaskStatus
from sparkboard.schemas.base import APIModel, require_text


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class TaskCreate(APIModel):
    title: str
    description: Optional[str] = None
    # Free text here; normalized against the accepted spellings by the service
    status: Optional[str] = None
    due_date: Optional[datetime] = None
    assigned_to_id: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v):
        return require_text(v, "Title")

    @field_validator("due_date", mode="before")
    @classmethod
    def empty_due_date(cls, v):
        return _blank_to_none(v)


class TaskUpdate(APIModel):
    """Partial update; ``dueDate: null`` clears the due date."""
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[datetime] = None
    assigned_to_id: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_not_blank(cls, v):
        return require_text(v, "Title")

    @field_validator("due_date", mode="before")
    @classmethod
    def empty_due_date(cls, v):
        return _blank_to_none(v)


class TaskRead(APIModel):
    id: str
    project_id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: Optional[datetime] = None
    assigned_to_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
