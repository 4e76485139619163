"""
Project Model Module

This module defines the Project model: a body of work owned by one user,
optionally promoted from an Idea, and containing Tasks.
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field, JSON, Column
import uuid
from datetime import datetime, timezone


class ProjectStatus(str, Enum):
    PLANNING = "Planning"
    IN_PROGRESS = "InProgress"
    ON_HOLD = "OnHold"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Project(SQLModel, table=True):
    """
    Project model representing a unit of planned work.

    Projects are owner-scoped: only the user referenced by owner_id can list,
    read, modify or delete them.

    Attributes:
        id: UUID primary key
        name: Project name, unique across all projects
        description: Detailed project description
        status: Current project status (a ProjectStatus value)
        owner_id: Foreign key to the User who owns this project
        assigned_to_user_ids: JSON array of user IDs working on the project (not validated)
        start_date: Planned start
        end_date: Planned end
        budget: Non-negative monetary amount
        idea_id: The Idea this project was promoted from, if any
        created_at: When the project was created
        updated_at: When the project was last modified
    """
    __tablename__ = "projects"

    # Primary key
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)

    # Basic project information
    name: str = Field(unique=True, index=True, nullable=False, max_length=255)
    description: Optional[str] = None

    # Status tracking - stored as the ProjectStatus string value
    status: str = Field(default=ProjectStatus.PLANNING.value)

    # Relationships
    owner_id: str = Field(foreign_key="users.id", index=True, nullable=False)
    assigned_to_user_ids: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    idea_id: Optional[str] = Field(default=None, foreign_key="ideas.id")

    # Timeline
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    budget: Optional[float] = None

    # Audit timestamps - automatically managed
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
