from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.middleware.transaction_handler import transactional
from app.models.user_profile import UserProfile
from app.schemas.onboarding import OnboardingForm
from app.utils.exceptions import ProfileAlreadyExistsException

logger = logging.getLogger(__name__)


class ProfileService:
    """Profils créés à la fin de l'onboarding"""

    def __init__(self, db: Session):
        self.db = db

    def get_profile(self, user_id: int) -> Optional[UserProfile]:
        return (
            self.db.query(UserProfile).filter(UserProfile.user_id == user_id).first()
        )

    def has_profile(self, user_id: int) -> bool:
        return self.get_profile(user_id) is not None

    @transactional
    def create_profile(self, user_id: int, form: OnboardingForm) -> UserProfile:
        """
        Enregistre le questionnaire complet en une seule insertion

        La contrainte d'unicité sur user_id protège contre deux soumissions
        concurrentes; la vérification préalable donne un message lisible.
        """
        if self.has_profile(user_id):
            logger.warning(f"Duplicate onboarding submission for user {user_id}")
            raise ProfileAlreadyExistsException()

        profile = UserProfile(user_id=user_id, **form.dict())
        self.db.add(profile)
        self.db.flush()

        logger.info(f"Profile created for user {user_id}")
        return profile
