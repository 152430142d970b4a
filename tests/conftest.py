"""
Shared fixtures: an in-memory SQLite database per test.
"""

import pytest
import pytest_asyncio

from authlink import IdentityClient
from authlink.adapters.database import build_engine, build_sessionmaker, create_schema
from authlink.config import Settings


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:", user_id_prefix="usr")


@pytest_asyncio.fixture
async def engine(settings):
    engine = build_engine(settings)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    async with build_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def client(db, settings):
    return IdentityClient(db, settings=settings)
