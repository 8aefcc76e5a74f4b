from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.core.config import settings
from app.core.database import get_db
from app.core.security import decode_token
from app.models.user import User
from app.models.user_profile import UserProfile
from app.services.user_service import UserService
from app.services.profile_service import ProfileService
from app.utils.exceptions import (
    NotAuthenticatedException,
    AdminGateClosedException,
    AdminNotConfiguredException,
    OnboardingRequiredError,
)

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> dict:
    """Jeton d'accès valide et non révoqué"""
    if not credentials:
        raise NotAuthenticatedException()

    payload = decode_token(credentials.credentials)

    if payload.get("type") != "access":
        raise NotAuthenticatedException("Invalid token type")

    if UserService(db).is_token_revoked(payload.get("jti")):
        raise NotAuthenticatedException("Session has been signed out")

    return payload


def get_current_user(
    payload: dict = Depends(get_token_payload),
    db: Session = Depends(get_db),
) -> User:
    user_id_str = payload.get("sub")
    if not user_id_str:
        raise NotAuthenticatedException("Invalid token payload")

    try:
        user_id = int(user_id_str)
    except (ValueError, TypeError):
        raise NotAuthenticatedException("Invalid token format")

    user = UserService(db).get_user_by_id(user_id)
    if not user:
        raise NotAuthenticatedException("User not found")

    return user


def get_current_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserProfile:
    profile = ProfileService(db).get_profile(current_user.id)
    if not profile:
        raise OnboardingRequiredError(current_user.id)

    return profile


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    if not settings.ADMIN_PASSWORD:
        raise AdminNotConfiguredException()

    if not credentials:
        raise AdminGateClosedException("Admin access required")

    payload = decode_token(credentials.credentials)
    if payload.get("type") != "admin":
        logger.warning("Non-admin token presented to an admin endpoint")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    return payload
