from sqlalchemy import Column, Integer, String, Text, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    name = Column(String)
    household_size = Column(String)

    # Listes ordonnées, dans l'ordre de sélection
    dietary_style = Column(JSON, default=list)
    allergies = Column(JSON, default=list)
    cuisines = Column(JSON, default=list)

    spice = Column(String)
    dislikes = Column(Text)
    cook_time = Column(String)
    comfort_level = Column(String)
    want_to_grow = Column(String)

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="profile")

    def __repr__(self):
        return f"<UserProfile(id={self.id}, user_id={self.user_id}, name={self.name})>"
