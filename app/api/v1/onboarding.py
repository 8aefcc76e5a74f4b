from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import get_current_user
from app.models.user import User
from app.schemas.onboarding import (
    TOTAL_STEPS,
    OnboardingForm,
    OnboardingStatusResponse,
    OnboardingOptionsResponse,
    ProfileResponse,
    WizardRequest,
    WizardResponse,
)
from app.services.profile_service import ProfileService
from app.utils import choices
from app.utils.wizard import apply_action, is_last_step, progress_percent

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


@router.get("", response_model=OnboardingStatusResponse)
def get_onboarding_status(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Un profil existant court-circuite le questionnaire"""
    profile = ProfileService(db).get_profile(current_user.id)

    if profile:
        return {"completed": True, "profile": profile, "redirect_to": "/feed"}

    return {"completed": False}


@router.get("/options", response_model=OnboardingOptionsResponse)
def get_onboarding_options():
    return {
        "total_steps": TOTAL_STEPS,
        "household_sizes": choices.HOUSEHOLD_SIZES,
        "dietary_styles": choices.DIETARY_STYLES,
        "allergies": choices.ALLERGIES,
        "spice_levels": choices.SPICE_LEVELS,
        "cuisines": choices.CUISINES,
        "cook_times": choices.COOK_TIMES,
        "comfort_levels": choices.COMFORT_LEVELS,
        "want_to_grow": choices.WANT_TO_GROW,
    }


@router.post("/wizard", response_model=WizardResponse)
def advance_wizard(request: WizardRequest):
    try:
        state = apply_action(request.state, request.action)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )

    return {
        "state": state,
        "progress": progress_percent(state.step),
        "is_last_step": is_last_step(state),
    }


@router.post(
    "/profile", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED
)
def complete_onboarding(
    request: OnboardingForm,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ProfileService(db).create_profile(current_user.id, request)
