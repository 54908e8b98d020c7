# models/profile.py
from sqlalchemy import Column, Integer, String, Date, Text, Float, Boolean, DateTime, JSON, Enum
from sqlalchemy.sql import func

from .base import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    display_name = Column(String(100), nullable=True)
    birthdate = Column(Date, nullable=True)
    gender = Column(Enum("male", "female", "other", name="profile_gender"), nullable=True, index=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String(512), nullable=True)
    address = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    interests = Column(JSON, nullable=False, default=list)

    # Предпочтения того, кто смотрит ленту
    seeking_gender = Column(Enum("male", "female", "both", name="profile_seeking_gender"), nullable=True)
    age_min = Column(Integer, nullable=True)
    age_max = Column(Integer, nullable=True)
    distance_km = Column(Integer, nullable=True)

    # true, когда пройдены все шаги настройки профиля
    is_complete = Column(Boolean, default=False, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Profile id={self.id} name={self.display_name} complete={self.is_complete}>"
