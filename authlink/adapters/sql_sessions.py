"""
SQL Session Adapter - sessions stored in ``nextauth_sessions``.
"""

from typing import Any, Dict, Optional
from datetime import datetime

from sqlalchemy import delete, insert, select, update

from authlink.adapters.sql_base import SQLAdapter
from authlink.adapters.tables import sessions, users
from authlink.domain.mapping import row_to_session, row_to_user, session_to_values
from authlink.domain.session import AdapterSession, SessionAndUser
from authlink.errors import PersistenceError
from authlink.ports.session_port import SessionPort


class SQLSessionAdapter(SQLAdapter, SessionPort):
    """
    Relational session storage.

    Expiry is stored, not enforced: the framework decides what to do with an
    expired session it reads back.
    """

    async def create(self, session: AdapterSession) -> AdapterSession:
        rows = await self._write(
            insert(sessions).values(**session_to_values(session)).returning(sessions)
        )
        if not rows:
            raise PersistenceError("Failed to create session")
        return row_to_session(rows[0])

    async def get_with_user(self, session_token: str) -> Optional[SessionAndUser]:
        stmt = (
            select(sessions, users)
            .join(users, users.c.id == sessions.c.user_id)
            .where(sessions.c.session_token == session_token)
        )
        row = await self._fetch_one(stmt)
        if not row:
            return None
        return SessionAndUser(session=row_to_session(row), user=row_to_user(row))

    async def update(
        self,
        session_token: str,
        expires: Optional[datetime] = None,
        user_id: Optional[str] = None,
    ) -> AdapterSession:
        values: Dict[str, Any] = {}
        if expires is not None:
            values["expires"] = expires
        if user_id is not None:
            values["user_id"] = user_id
        if not values:
            raise ValueError("Session update needs expires or user_id")

        rows = await self._write(
            update(sessions)
            .where(sessions.c.session_token == session_token)
            .values(**values)
            .returning(sessions)
        )
        if not rows:
            raise PersistenceError("Failed to update session")
        return row_to_session(rows[0])

    async def delete(self, session_token: str) -> None:
        await self._write(
            delete(sessions)
            .where(sessions.c.session_token == session_token)
            .returning(sessions.c.session_token)
        )

    async def delete_by_user(self, user_id: str) -> int:
        rows = await self._write(
            delete(sessions)
            .where(sessions.c.user_id == user_id)
            .returning(sessions.c.session_token)
        )
        return len(rows)
