# schemas/swipe.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from core.constants import SwipeAction


class SwipeCreate(BaseModel):
    target_id: int = Field(..., description="ID профиля, по которому свайпнули")
    action: SwipeAction = Field(..., description="'like' или 'pass'")


class SwipeResult(BaseModel):
    success: bool
    is_match: bool
    match_id: Optional[int] = None
    error: Optional[str] = None


class SwipeRead(BaseModel):
    id: int
    actor_id: int
    target_id: int
    action: SwipeAction
    created_at: datetime

    class Config:
        from_attributes = True
