"""
Engine and session wiring.

The adapters borrow an AsyncSession owned by the application; these helpers
only build one from Settings for scripts, tests and local development.
"""

from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from authlink.adapters.tables import metadata
from authlink.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine described by settings.

    SQLite connections get foreign keys switched on so user deletes cascade.
    An in-memory SQLite database is pinned to a single connection.
    """
    url = make_url(settings.database_url)
    kwargs: Dict[str, Any] = {"echo": settings.echo_sql}

    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite and url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}

    engine = create_async_engine(url, **kwargs)

    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables. For tests and local development only."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
