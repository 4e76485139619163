from fastapi import APIRouter
from sparkboard.api.endpoints import (
    analytics, auth, health, ideas, profile, projects, tasks
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(profile.router, prefix="/auth/profile", tags=["auth"])

# Resource endpoints
api_router.include_router(ideas.router, prefix="/ideas", tags=["ideas"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(tasks.router, prefix="/projects", tags=["tasks"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
