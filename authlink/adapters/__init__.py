"""
Adapters - Implementations of ports.

Relational storage (SQLAlchemy, async):
- SQLUserAdapter: users and find-or-create
- SQLSessionAdapter: sessions
- SQLAccountAdapter: provider account links
- SQLAuthenticatorAdapter: passkey credentials
- SQLVerificationTokenAdapter: one-time verification tokens

Wiring:
- build_engine / build_sessionmaker / create_schema
"""

from authlink.adapters.sql_users import SQLUserAdapter
from authlink.adapters.sql_sessions import SQLSessionAdapter
from authlink.adapters.sql_accounts import SQLAccountAdapter
from authlink.adapters.sql_authenticators import SQLAuthenticatorAdapter
from authlink.adapters.sql_verification_tokens import SQLVerificationTokenAdapter
from authlink.adapters.database import build_engine, build_sessionmaker, create_schema

__all__ = [
    # Identity & sessions
    "SQLUserAdapter",
    "SQLSessionAdapter",
    "SQLAccountAdapter",
    # Credentials & tokens
    "SQLAuthenticatorAdapter",
    "SQLVerificationTokenAdapter",
    # Wiring
    "build_engine",
    "build_sessionmaker",
    "create_schema",
]
