from fastapi import APIRouter
from typing import Any

from sparkboard.core.config import settings

router = APIRouter()

@router.get("", response_model=dict[str, Any])
def health_check() -> Any:
    """
    Liveness probe; does not touch the database.
    """
    return {"status": "ok", "version": settings.VERSION}
