from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from sparkboard.models.user import UserRole
from sparkboard.schemas.base import APIModel

MIN_PASSWORD_LENGTH = 6


# Properties to receive via API on registration
class UserRegister(APIModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    user_name: Optional[str] = None
    bio: Optional[str] = None
    roles: Optional[List[UserRole]] = None


# Properties to receive via API on profile update
class ProfileUpdate(APIModel):
    user_name: Optional[str] = None
    bio: Optional[str] = None
    roles: Optional[List[UserRole]] = None

    @field_validator("roles")
    @classmethod
    def roles_not_null(cls, v):
        if v is None:
            raise ValueError("roles cannot be null")
        return v


# Properties to return to client (password is never included)
class UserRead(APIModel):
    id: str
    email: str
    user_name: Optional[str] = None
    bio: Optional[str] = None
    roles: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
