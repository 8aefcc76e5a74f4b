from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from app.core.database import Base


class RevokedToken(Base):
    __tablename__ = "revoked_tokens"

    id = Column(Integer, primary_key=True, index=True)
    jti = Column(String, unique=True, index=True, nullable=False)
    expires_at = Column(DateTime, nullable=False)
    revoked_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<RevokedToken(jti={self.jti}, expires_at={self.expires_at})>"
