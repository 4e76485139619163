from typing import Dict, List

from sqlalchemy import func
from sqlmodel import Session, select

from sparkboard.models.idea import Idea


def ideas_by_status(db: Session) -> List[Dict[str, object]]:
    """Count every idea in the system per status (not owner-scoped)."""
    statement = (
        select(Idea.status, func.count(Idea.id))
        .group_by(Idea.status)
        .order_by(Idea.status)
    )
    return [{"status": status, "count": count} for status, count in db.exec(statement).all()]
