"""
Shared plumbing for the SQLAlchemy adapters.
"""

from typing import Any, List, Optional

from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession


class SQLAdapter:
    """
    Base for adapters that borrow an application-owned AsyncSession.

    Every mutation is committed as its own unit of work. On failure the
    session is rolled back and the storage error propagates unchanged.
    """

    def __init__(self, db: AsyncSession):
        self._db = db

    async def _fetch_one(self, stmt: Any) -> Optional[Row]:
        result = await self._db.execute(stmt)
        return result.first()

    async def _fetch_all(self, stmt: Any) -> List[Row]:
        result = await self._db.execute(stmt)
        return list(result.all())

    async def _write(self, stmt: Any) -> List[Row]:
        """Execute a mutation with RETURNING and commit it."""
        try:
            result = await self._db.execute(stmt)
            rows = list(result.all())
            await self._db.commit()
        except Exception:
            await self._db.rollback()
            raise
        return rows
