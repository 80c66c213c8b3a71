"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from queryguard.api.health import router as health_router
from queryguard.api.users import router as users_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Users
api_router.include_router(users_router, tags=["Users"])
