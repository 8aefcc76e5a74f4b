from pydantic import BaseModel, EmailStr, Field, validator
from typing import Optional
from datetime import datetime
from enum import Enum

from app.core.config import settings


class AuthMode(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class SignUpRequest(LoginRequest):
    @validator("password")
    def validate_password_length(cls, v):
        if len(v) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password should be at least {settings.PASSWORD_MIN_LENGTH} characters"
            )
        return v


class AuthRequest(LoginRequest):
    """Formulaire unique: le mode bascule entre connexion et inscription"""

    mode: AuthMode = AuthMode.LOGIN


class UserResponse(BaseModel):
    id: int
    email: EmailStr
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserResponse
    redirect_to: str = "/"


class RefreshRequest(BaseModel):
    refresh_token: str


class LogoutRequest(BaseModel):
    refresh_token: Optional[str] = None


class LogoutResponse(BaseModel):
    redirect_to: str = "/auth"


class SessionResponse(BaseModel):
    user: UserResponse
