"""
API Routes package.
"""
from fastapi import APIRouter

from hr_platform.api.routes.health import router as health_router
from hr_platform.api.routes.candidates import router as candidates_router
from hr_platform.api.routes.skills import router as skills_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(candidates_router)
api_router.include_router(skills_router)

__all__ = [
    "api_router",
    "health_router",
    "candidates_router",
    "skills_router",
]
