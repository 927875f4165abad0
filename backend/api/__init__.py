"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    analyze_router,
    github_router,
    health_router,
    highlight_router,
    keys_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(github_router)
api_router.include_router(highlight_router)
api_router.include_router(analyze_router)
api_router.include_router(keys_router)

__all__ = ["api_router"]
