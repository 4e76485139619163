"""
User Service

Registration, credential checks and self-service profile management.
"""

from sqlalchemy import func
from sqlmodel import Session, select

from sparkboard.core.errors import Conflict, NotFound, Unauthenticated
from sparkboard.core.log import logger
from sparkboard.core.security import get_password_hash, verify_password
from sparkboard.models.user import User, UserRole
from sparkboard.schemas.user import ProfileUpdate, UserRegister
from sparkboard.services.base import apply_changes, save

EMAIL_CONFLICT = "User with this email already exists"


def get_user_by_email(db: Session, email: str):
    # Addresses are matched case-insensitively; registration normalizes the domain only
    return db.exec(select(User).where(func.lower(User.email) == email.strip().lower())).first()


def register(db: Session, user_in: UserRegister) -> User:
    """
    Create a new account.

    The password is hashed before storage. ``userName`` defaults to the local
    part of the email address and ``roles`` to ``["user"]``.

    Raises:
        Conflict: If a user with this email already exists
    """
    email = str(user_in.email)
    if get_user_by_email(db, email):
        raise Conflict(EMAIL_CONFLICT)

    roles = user_in.roles or [UserRole.USER]
    db_user = User(
        email=email,
        password=get_password_hash(user_in.password),
        user_name=user_in.user_name or email.split("@")[0],
        bio=user_in.bio,
        roles=[role.value for role in roles],
    )
    # The store backs up the existence check above when two registrations race
    db_user = save(db, db_user, EMAIL_CONFLICT)
    logger.info("Registered user {}", db_user.id)
    return db_user


def authenticate(db: Session, email: str, password: str) -> User:
    """Return the user whose credentials match, or raise Unauthenticated."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password):
        logger.info("Rejected login attempt")
        raise Unauthenticated("Invalid credentials")
    return user


def get_profile(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return user


def update_profile(db: Session, user: User, profile_in: ProfileUpdate) -> User:
    """Apply the supplied userName/bio/roles to the caller's own profile."""
    changes = profile_in.model_dump(exclude_unset=True)
    if "roles" in changes:
        changes["roles"] = [UserRole(role).value for role in changes["roles"]]
    apply_changes(user, changes)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
