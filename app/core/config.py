from pydantic import validator
from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    APP_NAME: str = "Grocery Deals API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    PASSWORD_MIN_LENGTH: int = 6

    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_TOKEN_EXPIRE_MINUTES: int = 240

    FEED_TIMEZONE: str = "UTC"

    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: List[str] = ["http://localhost", "http://localhost:3000"]

    @validator("DATABASE_URL")
    def fix_database_url(cls, v):
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @validator("FEED_TIMEZONE")
    def validate_feed_timezone(cls, v):
        import pytz

        try:
            pytz.timezone(v)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Timezone invalide: {v}")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
