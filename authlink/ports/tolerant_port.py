"""
Tolerant Port - operations that never fail on a missing user.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
from authlink.domain.result import TolerantResult
from authlink.ports.policy import AbsencePolicy, absence_policy


class TolerantPort(ABC):
    """Port: Background profile sync and administrative sign-out."""

    @absence_policy(AbsencePolicy.TOLERANT)
    @abstractmethod
    async def safe_update_user(
        self, provider: str, provider_account_id: str, patch: Dict[str, Any]
    ) -> TolerantResult:
        """
        Apply a profile patch to the user linked to a provider account.

        Args:
            provider: Provider name
            provider_account_id: Account id at the provider
            patch: AdapterUser field or users column names mapped to new values;
                unknown keys are logged and ignored

        Returns:
            TolerantResult with status 200, whether or not a user was found
        """
        pass

    @absence_policy(AbsencePolicy.TOLERANT)
    @abstractmethod
    async def safe_sign_out_user(
        self, provider: str, provider_account_id: str
    ) -> TolerantResult:
        """
        Delete every session of the user linked to a provider account.

        Returns:
            TolerantResult with status 200, whether or not a user was found
        """
        pass
