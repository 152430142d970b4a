"""
SQL User Adapter - find-or-create and maintenance of stored users.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authlink.adapters.sql_base import SQLAdapter
from authlink.adapters.tables import users
from authlink.domain.mapping import row_to_user, user_patch_values, user_to_values
from authlink.domain.user import AdapterUser, generate_user_id, is_usable_email
from authlink.errors import NotFoundError, PersistenceError
from authlink.log import safe_log_identifier
from authlink.ports.user_port import UserPort

logger = logging.getLogger(__name__)


class SQLUserAdapter(SQLAdapter, UserPort):
    """
    Users stored in the ``users`` table.

    resolve_or_create looks up before it inserts. Two concurrent first-sight
    requests for the same identity can both miss the lookup; the loser hits
    the primary key constraint and returns the winner's row instead.
    """

    def __init__(self, db: AsyncSession, id_prefix: str = "user"):
        """
        Initialize user adapter.

        Args:
            db: Shared AsyncSession (not owned)
            id_prefix: Prefix for generated user ids
        """
        super().__init__(db)
        self._id_prefix = id_prefix

    async def resolve_or_create(self, identity: AdapterUser) -> AdapterUser:
        existing = await self._lookup(identity)
        if existing:
            return existing

        new_user = AdapterUser(
            id=identity.provider_account_id or identity.id or generate_user_id(self._id_prefix),
            email=identity.email,
            email_verified=identity.email_verified,
            name=identity.name,
            image=identity.image,
        )

        try:
            rows = await self._write(
                insert(users).values(**user_to_values(new_user)).returning(users)
            )
        except IntegrityError:
            logger.info(
                "User %s was created concurrently, re-reading",
                safe_log_identifier(new_user.id, prefix="user"),
            )
            existing = await self._lookup(identity, user_id=new_user.id)
            if existing is None:
                raise
            return existing

        if not rows:
            raise PersistenceError("Failed to create user")

        logger.info("Created user %s", safe_log_identifier(new_user.id, prefix="user"))
        return row_to_user(rows[0])

    async def _lookup(
        self, identity: AdapterUser, user_id: Optional[str] = None
    ) -> Optional[AdapterUser]:
        """Email first, then provider account id, then an explicit id."""
        if identity.has_email():
            user = await self.get_by_email(identity.email)
            if user:
                return user

        for candidate in (identity.provider_account_id, user_id):
            if candidate:
                user = await self.get_by_id(candidate)
                if user:
                    return user

        return None

    async def get_by_email(self, email: Optional[str]) -> Optional[AdapterUser]:
        if not is_usable_email(email):
            return None

        # email is not unique: the oldest account wins
        stmt = (
            select(users)
            .where(users.c.email == email)
            .order_by(users.c.created_at, users.c.id)
            .limit(1)
        )
        row = await self._fetch_one(stmt)
        return row_to_user(row) if row else None

    async def get_by_id(self, user_id: str) -> Optional[AdapterUser]:
        row = await self._fetch_one(select(users).where(users.c.id == user_id))
        return row_to_user(row) if row else None

    async def update(self, user: AdapterUser) -> AdapterUser:
        existing = await self.get_by_id(user.id)
        if not existing:
            raise NotFoundError("User not found")

        values = user_patch_values(user)
        if not values:
            return existing

        rows = await self._write(
            update(users).where(users.c.id == user.id).values(**values).returning(users)
        )
        if not rows:
            raise PersistenceError("Failed to update user")

        return row_to_user(rows[0])

    async def delete(self, user_id: str) -> None:
        existing = await self.get_by_id(user_id)
        if not existing:
            raise NotFoundError("Delete User not found")

        await self._write(delete(users).where(users.c.id == user_id).returning(users.c.id))
        logger.info("Deleted user %s", safe_log_identifier(user_id, prefix="user"))
