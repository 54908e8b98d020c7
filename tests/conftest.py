import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from models.profile import Profile
from utils.reset_db import create_tables

TODAY = date.today()


def birthdate_for_age(age: int) -> date:
    # calculate_age считает разницу календарных лет
    return date(TODAY.year - age, 1, 1)


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_tables(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_profile(db):
    async def _make(**overrides) -> Profile:
        values = {
            "display_name": "Alex",
            "birthdate": birthdate_for_age(30),
            "gender": "female",
            "interests": [],
            "seeking_gender": "both",
            "age_min": 18,
            "age_max": 99,
            "distance_km": 100,
            "is_complete": True,
        }
        age = overrides.pop("age", None)
        if age is not None:
            values["birthdate"] = birthdate_for_age(age)
        values.update(overrides)
        profile = Profile(**values)
        db.add(profile)
        await db.commit()
        await db.refresh(profile)
        return profile

    return _make
