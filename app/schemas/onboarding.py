from pydantic import BaseModel, Field, validator
from typing import Optional, List
from datetime import datetime
from enum import Enum

from app.utils.validators import clean_choices

TOTAL_STEPS = 4

LIST_FIELDS = ("dietary_style", "allergies", "cuisines")
TEXT_FIELDS = (
    "name",
    "household_size",
    "spice",
    "dislikes",
    "cook_time",
    "comfort_level",
    "want_to_grow",
)


class OnboardingForm(BaseModel):
    name: str = Field("", max_length=100)
    household_size: str = ""
    dietary_style: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    spice: str = ""
    dislikes: str = Field("", max_length=500)
    cuisines: List[str] = Field(default_factory=list)
    cook_time: str = ""
    comfort_level: str = ""
    want_to_grow: str = ""

    @validator(*TEXT_FIELDS, pre=True)
    def strip_text(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    @validator(*LIST_FIELDS, pre=True)
    def normalize_choices(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return clean_choices(v)


class WizardActionType(str, Enum):
    NEXT = "next"
    BACK = "back"
    SET = "set"
    TOGGLE = "toggle"


class WizardAction(BaseModel):
    type: WizardActionType
    field: Optional[str] = None
    value: Optional[str] = None


class OnboardingState(BaseModel):
    step: int = Field(1, ge=1, le=TOTAL_STEPS)
    form: OnboardingForm = Field(default_factory=OnboardingForm)


class WizardRequest(BaseModel):
    state: OnboardingState = Field(default_factory=OnboardingState)
    action: WizardAction


class WizardResponse(BaseModel):
    state: OnboardingState
    progress: int
    is_last_step: bool


class ProfileResponse(BaseModel):
    id: int
    user_id: int
    name: Optional[str]
    household_size: Optional[str]
    dietary_style: List[str] = []
    allergies: List[str] = []
    spice: Optional[str]
    dislikes: Optional[str]
    cuisines: List[str] = []
    cook_time: Optional[str]
    comfort_level: Optional[str]
    want_to_grow: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class OnboardingStatusResponse(BaseModel):
    completed: bool
    profile: Optional[ProfileResponse] = None
    redirect_to: Optional[str] = None


class OnboardingOptionsResponse(BaseModel):
    total_steps: int
    household_sizes: List[str]
    dietary_styles: List[str]
    allergies: List[str]
    spice_levels: List[str]
    cuisines: List[str]
    cook_times: List[str]
    comfort_levels: List[str]
    want_to_grow: List[str]
