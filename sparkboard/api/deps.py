"""
API Dependencies Module

This module provides FastAPI dependency functions for authentication and authorization.
It implements a dual credential transport supporting both bearer tokens (for API clients)
and HTTP-only cookies (for browser clients). Either way the credential is a signed JWT
whose subject is the user id.
"""
from typing import List, Optional
from fastapi import Depends, Query, Request
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from sparkboard.core.config import settings
from sparkboard.core.errors import Forbidden, Unauthenticated
from sparkboard.core.security import decode_access_token
from sparkboard.db.session import get_db
from sparkboard.models.user import User, UserRole
from sparkboard.services import users as user_service

# Configure OAuth2 scheme to use the login endpoint
# auto_error=False allows us to check cookies as a fallback
reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_PREFIX}/login",
    auto_error=False  # Don't raise error immediately if Authorization header is missing
)


def get_token(
    request: Request,
    token: Optional[str] = Depends(reusable_oauth2),
) -> str:
    """
    Extract the raw credential from the request.

    The Authorization header wins; otherwise the auth cookie is used. A cookie
    value in "Bearer <token>" form is accepted as well.

    Raises:
        Unauthenticated: If neither carries a credential
    """
    if not token:
        token = request.cookies.get(settings.AUTH_COOKIE_NAME)
        if token and token.startswith("Bearer "):
            token = token[len("Bearer "):]

    if not token:
        raise Unauthenticated("Unauthorized")
    return token


def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(get_token),
) -> User:
    """
    Dependency that resolves the authenticated user.

    Returns:
        User: The user named by the token's subject

    Raises:
        Unauthenticated (401): Missing, expired or tampered credential; the cookie is cleared
        NotFound (404): The token is valid but its user no longer exists
    """
    payload = decode_access_token(token)
    return user_service.get_profile(db, payload["sub"])


class RoleChecker:
    """
    Dependency factory for checking user roles.

    Usage: Depends(RoleChecker([UserRole.ADMIN]))
    """
    def __init__(self, allowed_roles: List[UserRole]):
        self.allowed_roles = allowed_roles

    def __call__(self, current_user: User = Depends(get_current_user)) -> User:
        # Check if user has at least one of the allowed roles
        if not any(role.value in (current_user.roles or []) for role in self.allowed_roles):
            raise Forbidden(
                f"The user does not have enough privileges. Required roles: {[r.value for r in self.allowed_roles]}"
            )
        return current_user


def _positive_int_or(value: Optional[str], default: int, maximum: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    return min(number, maximum)


class Pagination:
    def __init__(self, page: int, page_size: int):
        self.page = page
        self.page_size = page_size


def get_pagination(
    page: Optional[str] = Query(default=None),
    page_size: Optional[str] = Query(default=None, alias="pageSize"),
) -> Pagination:
    """
    Read ``page``/``pageSize`` from the query string.

    Non-numeric or non-positive values fall back to the defaults instead of
    failing. Values above MAX_PAGE / MAX_PAGE_SIZE are clamped so the offset
    always fits the store's integer type.
    """
    return Pagination(
        page=_positive_int_or(page, settings.DEFAULT_PAGE, settings.MAX_PAGE),
        page_size=_positive_int_or(page_size, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE),
    )
