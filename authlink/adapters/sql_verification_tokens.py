"""
SQL Verification Token Adapter - tokens stored in ``nextauth_verification_tokens``.
"""

from typing import Optional

from sqlalchemy import and_, delete, insert

from authlink.adapters.sql_base import SQLAdapter
from authlink.adapters.tables import verification_tokens
from authlink.domain.mapping import row_to_token, token_to_values
from authlink.domain.verification_token import VerificationToken
from authlink.errors import PersistenceError
from authlink.ports.verification_token_port import VerificationTokenPort


class SQLVerificationTokenAdapter(SQLAdapter, VerificationTokenPort):
    """Relational verification token storage."""

    async def create(self, token: VerificationToken) -> VerificationToken:
        rows = await self._write(
            insert(verification_tokens)
            .values(**token_to_values(token))
            .returning(verification_tokens)
        )
        if not rows:
            raise PersistenceError("Failed to create verification token")
        return row_to_token(rows[0])

    async def consume(self, identifier: str, token: str) -> Optional[VerificationToken]:
        # single DELETE ... RETURNING round-trip
        rows = await self._write(
            delete(verification_tokens)
            .where(
                and_(
                    verification_tokens.c.identifier == identifier,
                    verification_tokens.c.token == token,
                )
            )
            .returning(verification_tokens)
        )
        return row_to_token(rows[0]) if rows else None
