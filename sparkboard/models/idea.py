"""
Idea Model Module

Ideas are proposals owned by a single user. An idea can later be promoted into
a Project, which keeps a back-reference to it.
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field, JSON, Column
import uuid
from datetime import datetime, timezone


class IdeaStatus(str, Enum):
    # Any status may follow any other; transitions are client-driven
    DRAFT = "Draft"
    PRIORITIZED = "Prioritized"
    ARCHIVED = "Archived"
    CONVERTED_TO_PROJECT = "ConvertedToProject"
    IMPLEMENTED = "Implemented"


class IdeaPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Idea(SQLModel, table=True):
    """
    Idea table model.

    Attributes:
        id: UUID primary key
        title: Unique across all ideas (enforced by the store)
        description: Optional free text
        status: One of IdeaStatus (stored as its string value)
        tags: Ordered list of free-text labels, stored as JSON
        priority: Optional IdeaPriority value
        user_id: Owning user
    """
    __tablename__ = "ideas"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    title: str = Field(unique=True, index=True, nullable=False, max_length=255)
    description: Optional[str] = None
    status: str = Field(default=IdeaStatus.DRAFT.value)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    priority: Optional[str] = None

    # Ownership
    user_id: str = Field(foreign_key="users.id", index=True, nullable=False)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
