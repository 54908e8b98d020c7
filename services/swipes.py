"""
Запись свайпов и обнаружение взаимного лайка.

Свайп сохраняется отдельным коммитом до проверки взаимности, поэтому ошибка
при создании матча не откатывает сам свайп. Единственность матча на пару
гарантирует уникальный индекс uq_matches_pair: проигравший в гонке двух
встречных лайков получает ConstraintViolation и просто читает уже созданный
матч.
"""
import logging

from core.constants import SWIPE_ACTIONS
from core.exceptions import ConstraintViolation, InvalidSwipe, MatchingError, PersistenceError
from models.match import Match
from schemas.swipe import SwipeResult
from services.stores import MatchStore, SwipeStore

logger = logging.getLogger(__name__)


class SwipeRecorder:
    def __init__(self, swipes: SwipeStore, matches: MatchStore):
        self.swipes = swipes
        self.matches = matches

    async def create_swipe(self, actor_id: int, target_id: int, action: str) -> SwipeResult:
        if action not in SWIPE_ACTIONS:
            raise InvalidSwipe(f"Unknown swipe action: {action!r}")
        if actor_id == target_id:
            raise InvalidSwipe("You cannot swipe on yourself")

        # 1) Свайп пишется всегда, без дедупликации
        try:
            await self.swipes.insert(actor_id, target_id, action)
        except PersistenceError as exc:
            return SwipeResult(success=False, is_match=False, error=exc.message)

        if action == "pass":
            return SwipeResult(success=True, is_match=False)

        # 2) Лайк: проверяем взаимность и при необходимости создаём матч
        try:
            match = await self.detect_match(actor_id, target_id)
        except MatchingError as exc:
            logger.warning(
                "Swipe %s→%s saved, match detection failed: %s", actor_id, target_id, exc.message
            )
            return SwipeResult(success=False, is_match=False, error=exc.message)

        if match is None:
            return SwipeResult(success=True, is_match=False)
        return SwipeResult(success=True, is_match=True, match_id=match.id)

    async def detect_match(self, actor_id: int, target_id: int):
        """
        Проверка взаимности без записи свайпа. Повторный вызов безопасен:
        возвращает тот же матч, что и первый.
        """
        reciprocal = await self.swipes.exists(target_id, actor_id, "like")
        if not reciprocal:
            return None
        return await self.ensure_match(actor_id, target_id)

    async def ensure_match(self, user_a: int, user_b: int) -> Match:
        existing = await self.matches.get_by_pair(user_a, user_b)
        if existing is not None:
            return existing

        try:
            match = await self.matches.create(user_a, user_b)
        except ConstraintViolation as exc:
            logger.warning("Concurrent match creation for %s↔%s, reading existing row", user_a, user_b)
            existing = await self.matches.get_by_pair(user_a, user_b)
            if existing is None:
                raise PersistenceError("Failed to create match", cause=exc)
            return existing

        logger.info("Match %s created for %s↔%s", match.id, match.user1_id, match.user2_id)
        return match
