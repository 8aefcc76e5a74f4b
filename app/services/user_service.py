from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from datetime import datetime
from typing import Optional
import logging

from app.middleware.transaction_handler import transactional
from app.models.user import User
from app.models.revoked_token import RevokedToken
from app.core.security import get_password_hash, verify_password, token_expiry
from app.schemas.auth import AuthMode

logger = logging.getLogger(__name__)


class UserService:
    """Service de gestion des utilisateurs et des sessions"""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.lower()).first()

    @transactional
    def create_user(self, email: str, password: str) -> User:
        """
        Crée un nouvel utilisateur

        Raises:
            HTTPException 400 si l'email est déjà enregistré
        """
        email = email.lower()
        if self.get_user_by_email(email):
            logger.warning(f"Sign-up refused: {email} already registered")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already registered",
            )

        user = User(email=email, password_hash=get_password_hash(password))
        self.db.add(user)
        self.db.flush()

        logger.info(f"User created: {user.id} - {user.email}")
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        user = self.get_user_by_email(email)

        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for {email}")
            return None

        return user

    def sign_in_or_up(self, mode: AuthMode, email: str, password: str) -> User:
        """Connexion ou inscription selon le mode choisi dans le formulaire"""
        if mode == AuthMode.SIGNUP:
            return self.create_user(email, password)

        user = self.authenticate(email, password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid login credentials",
            )
        return user

    def is_token_revoked(self, jti: Optional[str]) -> bool:
        if not jti:
            return False
        return (
            self.db.query(RevokedToken).filter(RevokedToken.jti == jti).first()
            is not None
        )

    def _add_revocation(self, payload: dict) -> bool:
        jti = payload.get("jti")
        if not jti or self.is_token_revoked(jti):
            return False

        self.db.add(RevokedToken(jti=jti, expires_at=token_expiry(payload)))
        logger.info(f"Token revoked for sub={payload.get('sub')}")
        return True

    @transactional
    def revoke_token(self, payload: dict) -> bool:
        """Révoque un jeton décodé; False s'il l'était déjà"""
        return self._add_revocation(payload)

    @transactional
    def sign_out(
        self, access_payload: dict, refresh_payload: Optional[dict] = None
    ) -> None:
        """Révoque le jeton d'accès et le refresh token du même utilisateur, en une transaction"""
        self._add_revocation(access_payload)

        if (
            refresh_payload
            and refresh_payload.get("type") == "refresh"
            and refresh_payload.get("sub") == access_payload.get("sub")
        ):
            self._add_revocation(refresh_payload)

    @transactional
    def purge_expired_revocations(self, now: Optional[datetime] = None) -> int:
        now = now or datetime.utcnow()
        count = (
            self.db.query(RevokedToken)
            .filter(RevokedToken.expires_at < now)
            .delete(synchronize_session=False)
        )
        logger.info(f"Purged {count} expired revoked tokens")
        return count
