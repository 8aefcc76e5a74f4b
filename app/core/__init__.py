from app.core.config import settings
from app.core.database import Base, engine, SessionLocal, get_db
from app.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    create_refresh_token,
    create_admin_token,
    check_admin_password,
    decode_token,
)

__all__ = [
    "settings",
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "get_password_hash",
    "verify_password",
    "create_access_token",
    "create_refresh_token",
    "create_admin_token",
    "check_admin_password",
    "decode_token",
]
