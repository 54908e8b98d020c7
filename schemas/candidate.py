# schemas/candidate.py
from typing import List, Optional

from pydantic import BaseModel, Field


class MatchCandidate(BaseModel):
    """
    Кандидат для ленты свайпов: публичная часть профиля плюс вычисленные
    возраст и расстояние до зрителя. В БД не сохраняется.
    """
    user_id: int = Field(..., description="ID профиля кандидата")
    name: str = Field(..., description="Отображаемое имя")
    age: int = Field(..., ge=0, description="Возраст в годах")
    avatar_url: Optional[str] = Field(None, description="URL аватара")
    bio: Optional[str] = Field(None, description="О себе")
    interests: List[str] = Field([], description="Интересы кандидата")
    address: Optional[str] = Field(None, description="Адрес")
    distance_km: Optional[float] = Field(None, description="Расстояние до зрителя, км; None, если неизвестно")
    gender: Optional[str] = Field(None, description="Пол")
    shared_interests: int = Field(0, ge=0, description="Число общих интересов со зрителем")

    class Config:
        from_attributes = True
