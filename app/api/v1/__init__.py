"""
API v1 routes
"""

from fastapi import APIRouter
from app.api.v1 import auth, onboarding, feed, admin

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(onboarding.router)
api_router.include_router(feed.router)
api_router.include_router(admin.router)

__all__ = ["api_router"]
