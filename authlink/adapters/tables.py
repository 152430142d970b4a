"""
Relational schema for users, accounts, sessions, authenticators and tokens.

Migrations are managed outside this package; the metadata here describes
the tables the adapters read and write.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    Table,
    Text,
    func,
)
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always reads back in UTC.

    Values are converted to UTC on write; naive values are taken to be UTC
    already. Backends that drop the offset (SQLite) get it re-attached on read.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True),
    Column("email", Text, nullable=True, index=True),
    Column("full_name", Text, nullable=True),
    Column("avatar", Text, nullable=True),
    Column("email_verified_at", UTCDateTime(), nullable=True),
    Column("created_at", UTCDateTime(), server_default=func.now(), nullable=False),
    Column(
        "updated_at",
        UTCDateTime(),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    ),
)

accounts = Table(
    "nextauth_accounts",
    metadata,
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("type", Text, nullable=False),
    Column("provider", Text, nullable=False),
    Column("provider_account_id", Text, nullable=False),
    Column("refresh_token", Text, nullable=True),
    Column("access_token", Text, nullable=True),
    Column("expires_at", Integer, nullable=True),
    Column("token_type", Text, nullable=True),
    Column("scope", Text, nullable=True),
    Column("id_token", Text, nullable=True),
    Column("session_state", Text, nullable=True),
    PrimaryKeyConstraint("provider", "provider_account_id"),
)

sessions = Table(
    "nextauth_sessions",
    metadata,
    Column("session_token", Text, primary_key=True),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("expires", UTCDateTime(), nullable=False),
)

authenticators = Table(
    "nextauth_authenticators",
    metadata,
    Column("credential_id", Text, nullable=False, unique=True),
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("provider_account_id", Text, nullable=False),
    Column("credential_public_key", Text, nullable=False),
    Column("counter", Integer, nullable=False),
    Column("credential_device_type", Text, nullable=False),
    Column("credential_backed_up", Boolean, nullable=False),
    Column("transports", Text, nullable=True),
    PrimaryKeyConstraint("user_id", "credential_id"),
)

verification_tokens = Table(
    "nextauth_verification_tokens",
    metadata,
    Column("identifier", Text, nullable=False),
    Column("token", Text, nullable=False),
    Column("expires", UTCDateTime(), nullable=False),
    PrimaryKeyConstraint("identifier", "token"),
)
