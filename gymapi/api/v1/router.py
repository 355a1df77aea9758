"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from gymapi.api.v1.endpoints import auth, exercises, metrics, progress, routines

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    routines.router, prefix="/routines", tags=["Routines"]
)
api_router.include_router(
    exercises.router, prefix="/exercises", tags=["Exercises"]
)
api_router.include_router(
    metrics.router, prefix="/metrics", tags=["Body metrics"]
)
api_router.include_router(
    progress.router, prefix="/progress", tags=["Progress"]
)
