from app.models.user import User
from app.models.user_profile import UserProfile
from app.models.deal import Deal
from app.models.revoked_token import RevokedToken

__all__ = [
    "User",
    "UserProfile",
    "Deal",
    "RevokedToken",
]
