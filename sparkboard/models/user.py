"""
User Model Module

This module defines the User model and UserRole enumeration for authentication
and authorization throughout the application.
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field, JSON, Column
import uuid
from datetime import datetime, timezone


class UserRole(str, Enum):
    """
    Enumeration of user roles.

    - USER: Regular account; sees and mutates only what it owns (default role)
    - ADMIN: May additionally read cross-user aggregates such as analytics
    """
    USER = "user"
    ADMIN = "admin"


class User(SQLModel, table=True):
    """
    User model representing authenticated users in the system.

    Users are identified by UUID and authenticated via email/password.

    Attributes:
        id: Unique identifier (UUID) automatically generated for each user
        email: User's email address, used for authentication (required, unique, indexed)
        password: Hashed password (bcrypt), never returned by the API
        user_name: Display name
        bio: Free-text profile description
        roles: List of UserRole values assigned to this user (default: [USER])
        created_at: When the account was created
        updated_at: When the profile was last modified
    """
    __tablename__ = "users"

    # Primary key - auto-generated UUID for global uniqueness
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)

    # Authentication fields
    email: str = Field(unique=True, index=True, nullable=False, max_length=255)
    password: str = Field(nullable=False)  # Hashed password (bcrypt)

    # Profile information
    user_name: Optional[str] = None
    bio: Optional[str] = None

    # Authorization - stored as JSON array in database
    roles: List[str] = Field(default_factory=lambda: [UserRole.USER.value], sa_column=Column(JSON))

    # Audit timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        """Helper to check if user holds the admin role."""
        return UserRole.ADMIN.value in (self.roles or [])
