from datetime import datetime, timezone
from typing import Any, Dict, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel

from sparkboard.core.errors import Conflict, is_unique_violation
from sparkboard.core.log import logger

ModelT = TypeVar("ModelT", bound=SQLModel)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def save(db: Session, instance: ModelT, conflict_message: str) -> ModelT:
    """
    Persist ``instance`` and refresh it.

    A uniqueness violation reported by the store becomes ``Conflict``; any
    other integrity error propagates unchanged.
    """
    db.add(instance)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            logger.info("Unique constraint rejected {}: {}", type(instance).__name__, conflict_message)
            raise Conflict(conflict_message) from exc
        raise
    db.refresh(instance)
    return instance


def apply_changes(instance: SQLModel, changes: Dict[str, Any]) -> None:
    """Copy the supplied fields onto ``instance`` and bump its ``updated_at``."""
    for field, value in changes.items():
        setattr(instance, field, value)
    instance.updated_at = utcnow()
