from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from sparkboard.models.project import ProjectStatus
from sparkboard.schemas.base import APIModel, require_text


def timeline_is_inverted(start_date: Optional[datetime], end_date: Optional[datetime]) -> bool:
    """True when both dates are set and the end precedes the start."""
    if start_date is None or end_date is None:
        return False
    # Values loaded back from SQLite are naive
    if (start_date.tzinfo is None) != (end_date.tzinfo is None):
        start_date = start_date.replace(tzinfo=None)
        end_date = end_date.replace(tzinfo=None)
    return end_date < start_date


def _check_timeline(start_date: Optional[datetime], end_date: Optional[datetime]) -> None:
    if timeline_is_inverted(start_date, end_date):
        raise ValueError("End date cannot be before start date")


class ProjectCreate(APIModel):
    name: str
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    assigned_to_user_ids: Optional[List[str]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[float] = Field(default=None, ge=0)
    idea_id: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v):
        return require_text(v, "Name")

    @model_validator(mode="after")
    def check_timeline(self):
        _check_timeline(self.start_date, self.end_date)
        return self


class ProjectUpdate(APIModel):
    """Partial update; unset fields keep their stored values."""
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    assigned_to_user_ids: Optional[List[str]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[float] = Field(default=None, ge=0)
    idea_id: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, v):
        return require_text(v, "Name")

    @field_validator("status", mode="before")
    @classmethod
    def status_not_null(cls, v):
        if v is None:
            raise ValueError("Status cannot be null")
        return v

    @field_validator("assigned_to_user_ids")
    @classmethod
    def assignees_default_empty(cls, v):
        return v or []

    @model_validator(mode="after")
    def check_timeline(self):
        _check_timeline(self.start_date, self.end_date)
        return self


class ProjectRead(APIModel):
    id: str
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    owner_id: str
    assigned_to_user_ids: List[str] = []
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: Optional[float] = None
    idea_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
