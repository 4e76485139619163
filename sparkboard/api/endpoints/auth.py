"""
Authentication Endpoints Module

This module provides authentication endpoints for user registration, login, and logout.
The issued JWT is returned in the response body for API clients and also set as an
HTTP-only cookie for browser clients.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from sparkboard.core.config import settings
from sparkboard.core.log import logger
from sparkboard.core.security import create_access_token
from sparkboard.db.session import get_db
from sparkboard.schemas.auth import LoginRequest, LoginResponse
from sparkboard.schemas.base import Message
from sparkboard.schemas.user import UserRead, UserRegister
from sparkboard.services import users as user_service

router = APIRouter()


@router.post("/auth/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account.

    Creates a new user with the provided email and password. The password is
    hashed before storage and is never returned.

    Returns:
        UserRead: The newly created user

    Raises:
        400: If email or password is missing, or the password is shorter than 6 characters
        409: If a user with this email already exists
    """
    return user_service.register(db, user_in)


@router.post("/login", response_model=LoginResponse)
@router.post("/auth/login", response_model=LoginResponse, include_in_schema=False)
def login(credentials: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """
    Authenticate a user and issue an access token.

    The token is returned in the body and also stored in an HTTP-only cookie so
    that browser clients are authenticated on subsequent requests.

    Raises:
        400: If email or password is missing
        401: If the credentials are invalid
    """
    user = user_service.authenticate(db, credentials.email, credentials.password)

    token, expires = create_access_token(subject=user.id, extra_claims={"email": user.email})

    # httponly=True prevents JavaScript access to the cookie (XSS protection)
    # samesite="lax" provides CSRF protection while allowing normal navigation
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        expires=expires,
        path="/",
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    logger.info("User {} logged in", user.id)

    return {
        "message": "Login successful",
        "user": user,
        "token": token,
        "expires": expires,
    }


@router.post("/auth/logout", response_model=Message)
def logout(response: Response):
    """
    Log out by clearing the authentication cookie.

    API clients can simply discard their token.
    """
    response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
    return {"message": "Logout successful"}
