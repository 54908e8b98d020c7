import asyncio
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from models import Base

log = logging.getLogger(__name__)


def _resolve(bind: Optional[AsyncEngine]) -> AsyncEngine:
    if bind is None:
        from core.database import engine
        return engine
    return bind


async def create_tables(bind: Optional[AsyncEngine] = None) -> None:
    async with _resolve(bind).begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


async def async_reset_database(bind: Optional[AsyncEngine] = None) -> None:
    bind = _resolve(bind)
    log.info("Dropping profiles, swipes and matches...")
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all, checkfirst=True)

    log.info("Recreating all tables...")
    await create_tables(bind)
    log.info("Database schema has been reset.")


def reset_database():
    asyncio.run(async_reset_database())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    reset_database()
