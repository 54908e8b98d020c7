# schemas/profile.py
from typing import Optional, List
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from core.constants import INTEREST_MAP, Gender, SeekingGender


class PublicProfileRead(BaseModel):
    id: int
    display_name: Optional[str] = Field(None, description="Отображаемое имя")
    birthdate: Optional[date] = Field(None, description="Дата рождения")
    gender: Optional[Gender] = Field(None, description="Пол")
    bio: Optional[str] = Field(None, description="О себе")
    avatar_url: Optional[str] = Field(None, description="URL аватара")
    interests: List[str] = Field([], description="Интересы")

    class Config:
        from_attributes = True


class ProfileRead(PublicProfileRead):
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    seeking_gender: Optional[SeekingGender] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    distance_km: Optional[int] = None
    is_complete: bool
    created_at: datetime


class ProfileBasicInfo(BaseModel):
    display_name: str = Field(..., min_length=1, max_length=100, description="Имя в профиле")
    birthdate: date = Field(..., description="Дата рождения (YYYY-MM-DD)")
    gender: Gender = Field(..., description="Пол: 'male', 'female' или 'other'")
    bio: Optional[str] = Field(None, max_length=2000, description="О себе")


class ProfileInterests(BaseModel):
    interests: List[str] = Field(..., description="Ключи интересов из фиксированного словаря")

    @field_validator("interests")
    @classmethod
    def check_vocabulary(cls, value: List[str]) -> List[str]:
        unknown = [key for key in value if key not in INTEREST_MAP]
        if unknown:
            raise ValueError(f"Unknown interests: {', '.join(unknown)}")
        # Убираем дубли, сохраняя порядок
        return list(dict.fromkeys(value))


class ProfileLocation(BaseModel):
    address: Optional[str] = Field(None, max_length=255, description="Адрес")
    latitude: float = Field(..., ge=-90, le=90, description="Широта")
    longitude: float = Field(..., ge=-180, le=180, description="Долгота")


class ProfilePreferences(BaseModel):
    seeking_gender: SeekingGender = Field(..., description="Кого ищет: 'male', 'female' или 'both'")
    age_min: int = Field(18, ge=18, le=100)
    age_max: int = Field(99, ge=18, le=100)
    distance_km: int = Field(50, ge=1, le=20000, description="Радиус поиска, км")

    @model_validator(mode="after")
    def check_age_range(self):
        if self.age_min > self.age_max:
            raise ValueError("age_min must not exceed age_max")
        return self


class ProfileComplete(BaseModel):
    avatar_url: str = Field(..., min_length=1, max_length=512, description="URL загруженного аватара")
