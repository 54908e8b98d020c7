from pydantic import BaseModel
from typing import Literal


class TokenRequest(BaseModel):
    """Запрос токена по id профиля (только в DEBUG)."""
    user_id: int


class TokenResponse(BaseModel):
    """
    Ответ при успешном логине.
    """
    access_token: str
    token_type: Literal["bearer"]
    has_profile: bool
