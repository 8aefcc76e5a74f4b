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
    UserResponse,
)
from app.schemas.onboarding import (
    OnboardingForm,
    OnboardingState,
    WizardAction,
    WizardActionType,
    WizardRequest,
    WizardResponse,
    ProfileResponse,
    OnboardingStatusResponse,
    OnboardingOptionsResponse,
)
from app.schemas.deal import DealCreate, DealResponse, DealGroup, FeedResponse
from app.schemas.admin import (
    AdminLoginRequest,
    AdminTokenResponse,
    AdminDealForm,
    AdminDealSaveResponse,
    AdminOptionsResponse,
)

__all__ = [
    # Auth
    "AuthMode",
    "AuthRequest",
    "LoginRequest",
    "SignUpRequest",
    "TokenResponse",
    "RefreshRequest",
    "LogoutRequest",
    "LogoutResponse",
    "SessionResponse",
    "UserResponse",
    # Onboarding
    "OnboardingForm",
    "OnboardingState",
    "WizardAction",
    "WizardActionType",
    "WizardRequest",
    "WizardResponse",
    "ProfileResponse",
    "OnboardingStatusResponse",
    "OnboardingOptionsResponse",
    # Deals
    "DealCreate",
    "DealResponse",
    "DealGroup",
    "FeedResponse",
    # Admin
    "AdminLoginRequest",
    "AdminTokenResponse",
    "AdminDealForm",
    "AdminDealSaveResponse",
    "AdminOptionsResponse",
]
