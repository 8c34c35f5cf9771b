"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import logs, plans, profile, progress, session

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    plans.router, prefix="/plans", tags=["Plans"]
)
api_router.include_router(
    session.router, prefix="/session", tags=["Live session"]
)
api_router.include_router(
    logs.router, prefix="/logs", tags=["Session logs"]
)
api_router.include_router(
    progress.router, prefix="/progress", tags=["Progress"]
)
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile"]
)
