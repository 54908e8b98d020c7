# schemas/match.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.profile import PublicProfileRead


class MatchRead(BaseModel):
    match_id: int = Field(..., description="ID матча")
    created_at: datetime = Field(..., description="Когда образовался матч")
    last_message_at: Optional[datetime] = Field(None, description="Время последнего сообщения в чате")
    user: PublicProfileRead = Field(..., description="Второй участник матча")


class MatchLookup(BaseModel):
    match_id: Optional[int] = None
