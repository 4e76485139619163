"""
Task Model Module

This module defines the Task model. A task lives inside exactly one project and
its title is unique within that project.
"""
from enum import Enum
from typing import Optional
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
import uuid
from datetime import datetime, timezone


class TaskStatus(str, Enum):
    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"
    BLOCKED = "Blocked"


class Task(SQLModel, table=True):
    """
    Task table model.

    Attributes:
        id: UUID primary key
        project_id: Owning project (required)
        title: Unique within the owning project
        description: Optional free text
        status: A TaskStatus value
        due_date: Optional deadline
        assigned_to_id: User working on the task (weak reference, not validated)
    """
    __tablename__ = "tasks"
    __table_args__ = (
        UniqueConstraint("project_id", "title", name="uq_tasks_project_id_title"),
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)

    # Project association
    project_id: str = Field(foreign_key="projects.id", index=True, nullable=False, max_length=36)

    # Basic task information
    title: str = Field(nullable=False, max_length=255)
    description: Optional[str] = None
    status: str = Field(default=TaskStatus.TODO.value)

    due_date: Optional[datetime] = None
    assigned_to_id: Optional[str] = None

    # Audit timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
