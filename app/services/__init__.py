"""
Business logic services
"""

from app.services.user_service import UserService
from app.services.profile_service import ProfileService
from app.services.deal_service import DealService

__all__ = [
    "UserService",
    "ProfileService",
    "DealService",
]
