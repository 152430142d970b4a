"""
authlink - Identity & Session Adapter

Hexagonal adapter between a provider-agnostic authentication framework and
a relational user store.

Usage:
    from authlink import IdentityClient, AdapterUser
    from authlink.adapters import build_engine, build_sessionmaker
    from authlink.config import get_settings

    engine = build_engine(get_settings())
    sessionmaker = build_sessionmaker(engine)

    async with sessionmaker() as db:
        client = IdentityClient(db)

        # Find or create
        user = await client.users.resolve_or_create(identity)

        # Forced sign-out
        await client.safe_sign_out_user("google", "123")
"""

__version__ = "0.1.0"

from authlink.sdk.client import IdentityClient
from authlink.domain.user import AdapterUser
from authlink.domain.session import AdapterSession, SessionAndUser
from authlink.domain.account import AdapterAccount
from authlink.domain.authenticator import AdapterAuthenticator
from authlink.domain.verification_token import VerificationToken
from authlink.domain.result import TolerantResult
from authlink.errors import AuthlinkError, NotFoundError, PersistenceError

__all__ = [
    "IdentityClient",
    "AdapterUser",
    "AdapterSession",
    "SessionAndUser",
    "AdapterAccount",
    "AdapterAuthenticator",
    "VerificationToken",
    "TolerantResult",
    "AuthlinkError",
    "NotFoundError",
    "PersistenceError",
]
