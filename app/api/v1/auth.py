from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import get_current_user, get_token_payload
from app.core.security import create_access_token, create_refresh_token, decode_token
from app.models.user import User
from app.schemas.auth import (
    AuthMode,
    AuthRequest,
    LoginRequest,
    SignUpRequest,
    TokenResponse,
    RefreshRequest,
    LogoutRequest,
    LogoutResponse,
    SessionResponse,
)
from app.services.user_service import UserService
from app.utils.exceptions import NotAuthenticatedException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_tokens(user: User) -> dict:
    return {
        "access_token": create_access_token({"sub": str(user.id)}),
        "refresh_token": create_refresh_token({"sub": str(user.id)}),
        "token_type": "bearer",
        "user": user,
        "redirect_to": "/",
    }


@router.post("", response_model=TokenResponse)
def submit_credentials(request: AuthRequest, db: Session = Depends(get_db)):
    """Formulaire connexion / inscription, selon request.mode"""
    if (
        request.mode == AuthMode.SIGNUP
        and len(request.password) < settings.PASSWORD_MIN_LENGTH
    ):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Password should be at least {settings.PASSWORD_MIN_LENGTH} characters",
        )

    user = UserService(db).sign_in_or_up(request.mode, request.email, request.password)
    return _issue_tokens(user)


@router.post(
    "/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED
)
def signup(request: SignUpRequest, db: Session = Depends(get_db)):
    user = UserService(db).create_user(request.email, request.password)
    return _issue_tokens(user)


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = UserService(db).sign_in_or_up(
        AuthMode.LOGIN, request.email, request.password)
    return _issue_tokens(user)


@router.post("/refresh", response_model=TokenResponse)
def refresh_token(request: RefreshRequest, db: Session = Depends(get_db)):
    payload = decode_token(request.refresh_token)

    if payload.get("type") != "refresh":
        raise NotAuthenticatedException("Invalid token type")

    service = UserService(db)
    if service.is_token_revoked(payload.get("jti")):
        raise NotAuthenticatedException("Refresh token has been revoked")

    try:
        user = service.get_user_by_id(int(payload.get("sub")))
    except (ValueError, TypeError):
        raise NotAuthenticatedException("Invalid token payload")

    if not user:
        raise NotAuthenticatedException("User not found")

    # Rotation: l'ancien refresh token ne sert qu'une fois
    service.revoke_token(payload)
    return _issue_tokens(user)


@router.post("/logout", response_model=LogoutResponse)
def logout(
    request: Optional[LogoutRequest] = None,
    payload: dict = Depends(get_token_payload),
    db: Session = Depends(get_db),
):
    refresh_payload = None
    if request and request.refresh_token:
        try:
            refresh_payload = decode_token(request.refresh_token)
        except HTTPException:
            # Jeton illisible ou expiré: il ne peut déjà plus servir au refresh
            logger.warning("Ignoring undecodable refresh token on logout")

    UserService(db).sign_out(payload, refresh_payload)

    return {"redirect_to": "/auth"}


@router.get("/session", response_model=SessionResponse)
def get_session(current_user: User = Depends(get_current_user)):
    return {"user": current_user}
