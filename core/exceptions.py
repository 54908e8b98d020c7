"""Ошибки ядра подбора кандидатов и матчей."""
from typing import Optional


class MatchingError(Exception):
    """Базовая ошибка: человекочитаемое сообщение и исходная причина."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class NotAuthenticated(MatchingError):
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class NotFound(MatchingError):
    pass


class InvalidSwipe(MatchingError):
    pass


class PersistenceError(MatchingError):
    """Любой сбой хранилища при чтении или записи."""


class ConstraintViolation(PersistenceError):
    """Нарушение уникальности пары в matches: матч уже создан параллельным запросом."""
