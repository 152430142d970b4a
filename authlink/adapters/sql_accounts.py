"""
SQL Account Adapter - provider links stored in ``nextauth_accounts``.
"""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.exc import IntegrityError

from authlink.adapters.sql_base import SQLAdapter
from authlink.adapters.tables import accounts, users
from authlink.domain.account import AdapterAccount
from authlink.domain.mapping import account_to_values, row_to_account, row_to_user
from authlink.domain.user import AdapterUser
from authlink.errors import PersistenceError
from authlink.ports.account_port import AccountPort


class SQLAccountAdapter(SQLAdapter, AccountPort):
    """Relational account link storage."""

    @staticmethod
    def _matches(provider: str, provider_account_id: str):
        return and_(
            accounts.c.provider == provider,
            accounts.c.provider_account_id == provider_account_id,
        )

    async def link(self, account: AdapterAccount) -> AdapterAccount:
        try:
            rows = await self._write(
                insert(accounts).values(**account_to_values(account)).returning(accounts)
            )
        except IntegrityError as exc:
            raise PersistenceError("Failed to create account") from exc

        if not rows:
            raise PersistenceError("Failed to create account")
        return row_to_account(rows[0])

    async def unlink(self, provider: str, provider_account_id: str) -> None:
        await self._write(
            delete(accounts)
            .where(self._matches(provider, provider_account_id))
            .returning(accounts.c.provider)
        )

    async def get_user_by_account(
        self, provider: str, provider_account_id: str
    ) -> Optional[AdapterUser]:
        stmt = (
            select(users)
            .join(accounts, accounts.c.user_id == users.c.id)
            .where(self._matches(provider, provider_account_id))
        )
        row = await self._fetch_one(stmt)
        return row_to_user(row) if row else None

    async def get_account(
        self, provider_account_id: str, provider: str
    ) -> Optional[AdapterAccount]:
        row = await self._fetch_one(
            select(accounts).where(self._matches(provider, provider_account_id))
        )
        return row_to_account(row) if row else None
