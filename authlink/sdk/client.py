"""
Identity Client - the adapter surface the authentication framework calls.

Bundles the user, session, account, authenticator and verification token
adapters over one shared storage handle, and hosts the tolerant operations.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from authlink.adapters.sql_accounts import SQLAccountAdapter
from authlink.adapters.sql_authenticators import SQLAuthenticatorAdapter
from authlink.adapters.sql_sessions import SQLSessionAdapter
from authlink.adapters.sql_users import SQLUserAdapter
from authlink.adapters.sql_verification_tokens import SQLVerificationTokenAdapter
from authlink.config import Settings, get_settings
from authlink.domain.mapping import normalize_user_patch
from authlink.domain.result import TolerantResult
from authlink.errors import NotFoundError
from authlink.log import safe_log_identifier
from authlink.ports.tolerant_port import TolerantPort

logger = logging.getLogger(__name__)


class IdentityClient(TolerantPort):
    """
    Framework-facing identity and session adapter.

    Example:
        from authlink import IdentityClient, AdapterUser

        async with sessionmaker() as db:
            client = IdentityClient(db)
            user = await client.users.resolve_or_create(
                AdapterUser(email="alice@example.com", name="Alice")
            )
            await client.sessions.create(AdapterSession("tok-1", user.id, expires))

    The AsyncSession is borrowed: the client never closes it.
    """

    def __init__(self, db: AsyncSession, settings: Optional[Settings] = None):
        """
        Initialize identity client.

        Args:
            db: Shared storage handle (owned by the caller)
            settings: Optional settings, defaults to get_settings()
        """
        settings = settings or get_settings()

        self.users = SQLUserAdapter(db, id_prefix=settings.user_id_prefix)
        self.sessions = SQLSessionAdapter(db)
        self.accounts = SQLAccountAdapter(db)
        self.authenticators = SQLAuthenticatorAdapter(db)
        self.verification_tokens = SQLVerificationTokenAdapter(db)

    async def safe_update_user(
        self, provider: str, provider_account_id: str, patch: Dict[str, Any]
    ) -> TolerantResult:
        account_ref = f"{provider}:{safe_log_identifier(provider_account_id, prefix='acct')}"
        patch, unknown = normalize_user_patch(patch)
        if unknown:
            logger.warning(
                "Profile sync: ignoring unknown fields %s for account %s", unknown, account_ref
            )

        user = await self.accounts.get_user_by_account(provider, provider_account_id)

        if user:
            logger.info(
                "Profile sync: updating user %s for account %s",
                safe_log_identifier(user.id, prefix="user"),
                account_ref,
            )
            try:
                await self.users.update(replace(user, **patch))
                return TolerantResult(message="user updated")
            except NotFoundError:
                # deleted between the account lookup and the update
                pass

        logger.warning("Profile sync: no user was found for account %s", account_ref)
        return TolerantResult(message="user not found")

    async def safe_sign_out_user(
        self, provider: str, provider_account_id: str
    ) -> TolerantResult:
        account_ref = f"{provider}:{safe_log_identifier(provider_account_id, prefix='acct')}"
        user = await self.accounts.get_user_by_account(provider, provider_account_id)

        if not user:
            logger.warning("Sign out: no user was found for account %s", account_ref)
            return TolerantResult(message="user not found")

        deleted = await self.sessions.delete_by_user(user.id)
        logger.info(
            "Signing out user %s for account %s (%d sessions)",
            safe_log_identifier(user.id, prefix="user"),
            account_ref,
            deleted,
        )
        return TolerantResult(message="user signed out")
