"""
API router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from profilehub.api.endpoints import auth, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, tags=["Authentication"]
)
api_router.include_router(
    users.router, tags=["Users"]
)
