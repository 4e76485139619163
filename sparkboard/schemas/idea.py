from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from sparkboard.models.idea import IdeaPriority, IdeaStatus
from sparkboard.models.project import ProjectStatus
from sparkboard.schemas.base import APIModel, require_text


class IdeaCreate(APIModel):
    title: str
    description: Optional[str] = None
    status: Optional[IdeaStatus] = None
    tags: Optional[List[str]] = None
    priority: Optional[IdeaPriority] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v):
        return require_text(v, "Title")


class IdeaUpdate(APIModel):
    """
    Partial update. Only fields present in the request body are applied, so
    ``{"description": null}`` clears the description while omitting it leaves
    the stored value alone.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[IdeaStatus] = None
    tags: Optional[List[str]] = None
    priority: Optional[IdeaPriority] = None

    @field_validator("title", mode="before")
    @classmethod
    def title_not_blank(cls, v):
        return require_text(v, "Title")

    @field_validator("status", mode="before")
    @classmethod
    def status_not_null(cls, v):
        if v is None:
            raise ValueError("Status cannot be null")
        return v

    @field_validator("description")
    @classmethod
    def trim_description(cls, v):
        return v.strip() if v is not None else None

    @field_validator("tags")
    @classmethod
    def tags_default_empty(cls, v):
        return v or []


class IdeaConvert(APIModel):
    """Options for promoting an idea into a project; every field is optional."""
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None


class IdeaRead(APIModel):
    id: str
    title: str
    description: Optional[str] = None
    status: IdeaStatus
    tags: List[str] = []
    priority: Optional[IdeaPriority] = None
    user_id: str
    created_at: datetime
    updated_at: datetime
