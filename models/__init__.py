# Импортируем все модели, чтобы Base.metadata знал о таблицах
from .base import Base
from .profile import Profile
from .swipe import Swipe
from .match import Match

__all__ = ["Base", "Profile", "Swipe", "Match"]
