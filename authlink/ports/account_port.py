"""
Account Port - Interface for provider account links.

Implementations:
- SQLAccountAdapter: relational store via SQLAlchemy
"""

from abc import ABC, abstractmethod
from typing import Optional
from authlink.domain.account import AdapterAccount
from authlink.domain.user import AdapterUser
from authlink.ports.policy import AbsencePolicy, absence_policy


class AccountPort(ABC):
    """Port: Link provider accounts to users."""

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def link(self, account: AdapterAccount) -> AdapterAccount:
        """
        Link a provider account to a user.

        Raises:
            PersistenceError: "Failed to create account", including when the
                provider account is already linked
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def unlink(self, provider: str, provider_account_id: str) -> None:
        """Remove a link. Unlinking an absent account is not an error."""
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def get_user_by_account(
        self, provider: str, provider_account_id: str
    ) -> Optional[AdapterUser]:
        """
        Find the user a provider account is linked to.

        Returns:
            User if the link exists, None otherwise
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def get_account(
        self, provider_account_id: str, provider: str
    ) -> Optional[AdapterAccount]:
        """
        Get a linked account.

        Returns:
            Account if found, None otherwise
        """
        pass
