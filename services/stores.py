"""
Доступ к хранилищу для ядра подбора.

Каждое хранилище оборачивает AsyncSession, которую передают снаружи
(Depends(get_db) в роутерах, тестовая сессия в тестах). Ошибки SQLAlchemy
переводятся в PersistenceError, дубль пары в matches в ConstraintViolation.
"""
import logging
from datetime import datetime
from typing import Any, Collection, Dict, List, Optional

from sqlalchemy import select, or_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConstraintViolation, NotFound, PersistenceError
from core.ids import canonical_pair
from models.match import Match
from models.profile import Profile
from models.swipe import Swipe

logger = logging.getLogger(__name__)


class _Store:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fail(self, message: str, exc: SQLAlchemyError) -> PersistenceError:
        await self.db.rollback()
        logger.warning("%s: %s", message, exc)
        # Клиенту уходит только имя операции, SQL с параметрами остаётся в логе
        return PersistenceError(message, cause=exc)


class ProfileStore(_Store):

    async def get(self, user_id: int) -> Optional[Profile]:
        try:
            return await self.db.get(Profile, user_id)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to load profile", exc)

    async def get_or_404(self, user_id: int) -> Profile:
        profile = await self.get(user_id)
        if profile is None:
            raise NotFound(f"Profile {user_id} not found")
        return profile

    async def query_candidates(
        self,
        viewer_id: int,
        seeking_gender: Optional[str],
        exclude_ids: Collection[int],
        limit: int,
    ) -> List[Profile]:
        """Заполненные профили нужного пола, кроме самого зрителя и исключённых id."""
        stmt = select(Profile).where(
            Profile.is_complete.is_(True),
            Profile.id != viewer_id,
        )
        # "both" или пустое значение пол не ограничивает
        if seeking_gender in ("male", "female"):
            stmt = stmt.where(Profile.gender == seeking_gender)
        if exclude_ids:
            stmt = stmt.where(Profile.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(Profile.created_at.desc(), Profile.id).limit(limit)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to query candidate profiles", exc)
        return list(result.scalars().all())

    async def update(self, user_id: int, values: Dict[str, Any]) -> Profile:
        profile = await self.get_or_404(user_id)
        for field, value in values.items():
            setattr(profile, field, value)
        try:
            await self.db.commit()
            await self.db.refresh(profile)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to update profile", exc)
        return profile


class SwipeStore(_Store):

    async def insert(self, actor_id: int, target_id: int, action: str) -> Swipe:
        swipe = Swipe(actor_id=actor_id, target_id=target_id, action=action)
        self.db.add(swipe)
        try:
            await self.db.commit()
            await self.db.refresh(swipe)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to create swipe", exc)
        return swipe

    async def exists(self, actor_id: int, target_id: int, action: str) -> bool:
        # Дубли допустимы: достаточно любой подходящей строки
        stmt = (
            select(Swipe.id)
            .where(
                Swipe.actor_id == actor_id,
                Swipe.target_id == target_id,
                Swipe.action == action,
            )
            .limit(1)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to check swipe", exc)
        return result.first() is not None

    async def target_ids(self, actor_id: int, action: str) -> List[int]:
        stmt = (
            select(Swipe.target_id)
            .where(Swipe.actor_id == actor_id, Swipe.action == action)
            .distinct()
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to get swiped user ids", exc)
        return list(result.scalars().all())

    async def list_for_user(self, user_id: int, action: Optional[str] = None) -> List[Swipe]:
        stmt = select(Swipe).where(Swipe.actor_id == user_id)
        if action:
            stmt = stmt.where(Swipe.action == action)
        stmt = stmt.order_by(Swipe.created_at.desc(), Swipe.id.desc())
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to get user swipes", exc)
        return list(result.scalars().all())


class MatchStore(_Store):

    async def get_by_pair(self, user_a: int, user_b: int) -> Optional[Match]:
        u1, u2 = canonical_pair(user_a, user_b)
        stmt = select(Match).where(Match.user1_id == u1, Match.user2_id == u2)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to find match", exc)
        return result.scalar_one_or_none()

    async def find_id(self, user_a: int, user_b: int) -> Optional[int]:
        if user_a == user_b:
            return None
        match = await self.get_by_pair(user_a, user_b)
        return match.id if match else None

    async def create(self, user_a: int, user_b: int) -> Match:
        """
        Вставляет матч по канонической паре. Если пара уже есть (гонка двух
        встречных лайков), уникальный индекс отклоняет вставку и бросается
        ConstraintViolation; сессия при этом откатывается.
        """
        u1, u2 = canonical_pair(user_a, user_b)
        match = Match(user1_id=u1, user2_id=u2)
        self.db.add(match)
        try:
            await self.db.commit()
            await self.db.refresh(match)
        except IntegrityError as exc:
            await self.db.rollback()
            raise ConstraintViolation(f"Match {u1}↔{u2} already exists", cause=exc)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to create match", exc)
        return match

    async def list_for_user(self, user_id: int) -> List[Match]:
        stmt = (
            select(Match)
            .where(or_(Match.user1_id == user_id, Match.user2_id == user_id))
            .order_by(Match.created_at.desc(), Match.id.desc())
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to get user matches", exc)
        return list(result.scalars().all())

    async def touch(self, match_id: int, at: datetime) -> None:
        try:
            result = await self.db.execute(
                update(Match).where(Match.id == match_id).values(last_message_at=at)
            )
            await self.db.commit()
        except SQLAlchemyError as exc:
            raise await self._fail("Failed to update last_message_at", exc)
        if result.rowcount == 0:
            raise NotFound(f"Match {match_id} not found")
