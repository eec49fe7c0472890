"""
API Routes package.
"""
from fastapi import APIRouter

from skillroster.api.routes.auth import router as auth_router
from skillroster.api.routes.health import router as health_router
from skillroster.api.routes.skills import router as skills_router
from skillroster.api.routes.users import router as users_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(skills_router)
api_router.include_router(users_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "skills_router",
    "users_router",
]
