"""
Machine à états du questionnaire d'onboarding

Chaque transition est une fonction pure (état, action) -> nouvel état;
l'état reçu n'est jamais modifié.
"""

from app.schemas.onboarding import (
    LIST_FIELDS,
    TEXT_FIELDS,
    TOTAL_STEPS,
    OnboardingForm,
    OnboardingState,
    WizardAction,
    WizardActionType,
)


def progress_percent(step: int) -> int:
    return int(step / TOTAL_STEPS * 100 + 0.5)


def is_last_step(state: OnboardingState) -> bool:
    return state.step >= TOTAL_STEPS


def next_step(state: OnboardingState) -> OnboardingState:
    if is_last_step(state):
        return state
    return state.model_copy(update={"step": state.step + 1})


def previous_step(state: OnboardingState) -> OnboardingState:
    if state.step <= 1:
        return state
    return state.model_copy(update={"step": state.step - 1})


def set_field(state: OnboardingState, field: str, value) -> OnboardingState:
    if field not in TEXT_FIELDS:
        raise ValueError(f"Cannot set field: {field}")

    form = OnboardingForm(**{**state.form.dict(), field: value})
    return state.model_copy(update={"form": form})


def toggle_choice(state: OnboardingState, field: str, value: str) -> OnboardingState:
    """Ajoute la valeur si absente, la retire sinon"""
    if field not in LIST_FIELDS:
        raise ValueError(f"Cannot toggle field: {field}")
    if not value:
        raise ValueError("Toggle requires a value")

    current = list(getattr(state.form, field))
    if value in current:
        current = [v for v in current if v != value]
    else:
        current.append(value)

    form = OnboardingForm(**{**state.form.dict(), field: current})
    return state.model_copy(update={"form": form})


def apply_action(state: OnboardingState, action: WizardAction) -> OnboardingState:
    if action.type == WizardActionType.NEXT:
        return next_step(state)
    if action.type == WizardActionType.BACK:
        return previous_step(state)
    if action.type == WizardActionType.SET:
        return set_field(state, action.field, action.value)
    if action.type == WizardActionType.TOGGLE:
        return toggle_choice(state, action.field, action.value)

    raise ValueError(f"Unknown action: {action.type}")
