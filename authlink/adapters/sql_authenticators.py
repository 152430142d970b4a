"""
SQL Authenticator Adapter - passkeys stored in ``nextauth_authenticators``.
"""

from typing import List

from sqlalchemy import insert, select, update

from authlink.adapters.sql_base import SQLAdapter
from authlink.adapters.tables import authenticators
from authlink.domain.authenticator import AdapterAuthenticator
from authlink.domain.mapping import authenticator_to_values, row_to_authenticator
from authlink.errors import NotFoundError, PersistenceError
from authlink.ports.authenticator_port import AuthenticatorPort


class SQLAuthenticatorAdapter(SQLAdapter, AuthenticatorPort):
    """
    Relational authenticator storage.

    The transports column holds a comma-joined list or NULL; callers see a
    tuple or None.
    """

    async def create(self, authenticator: AdapterAuthenticator) -> AdapterAuthenticator:
        rows = await self._write(
            insert(authenticators)
            .values(**authenticator_to_values(authenticator))
            .returning(authenticators)
        )
        if not rows:
            raise PersistenceError("Failed to create authenticator")
        return row_to_authenticator(rows[0])

    async def get_by_credential_id(self, credential_id: str) -> AdapterAuthenticator:
        row = await self._fetch_one(
            select(authenticators).where(authenticators.c.credential_id == credential_id)
        )
        if not row:
            raise NotFoundError("Failed to get authenticator")
        return row_to_authenticator(row)

    async def list_by_user(self, user_id: str) -> List[AdapterAuthenticator]:
        rows = await self._fetch_all(
            select(authenticators).where(authenticators.c.user_id == user_id)
        )
        if not rows:
            raise NotFoundError("Failed to get authenticator list")
        return [row_to_authenticator(row) for row in rows]

    async def update_counter(self, credential_id: str, counter: int) -> AdapterAuthenticator:
        if counter < 0:
            raise ValueError(f"Authenticator counter must be non-negative, got {counter}")

        rows = await self._write(
            update(authenticators)
            .where(authenticators.c.credential_id == credential_id)
            .values(counter=counter)
            .returning(authenticators)
        )
        if not rows:
            raise PersistenceError("Failed to update authenticator counter")
        return row_to_authenticator(rows[0])
