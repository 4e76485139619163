from datetime import datetime

from pydantic import Field

from sparkboard.schemas.base import APIModel
from sparkboard.schemas.user import UserRead


class LoginRequest(APIModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(APIModel):
    message: str
    user: UserRead
    token: str
    token_type: str = "bearer"
    expires: datetime
