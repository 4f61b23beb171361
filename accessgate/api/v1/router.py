"""API v1 router configuration."""

from fastapi import APIRouter

from accessgate.api.v1.endpoints import (
    access,
    admin,
    dashboard,
    health,
    onboarding,
    subscriptions,
)

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(access.router)
api_router.include_router(onboarding.router)
api_router.include_router(subscriptions.router)
api_router.include_router(dashboard.router)
api_router.include_router(admin.router)
