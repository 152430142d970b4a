"""
Verification Token Port - Interface for one-time tokens.

Implementations:
- SQLVerificationTokenAdapter: relational store via SQLAlchemy
"""

from abc import ABC, abstractmethod
from typing import Optional
from authlink.domain.verification_token import VerificationToken
from authlink.ports.policy import AbsencePolicy, absence_policy


class VerificationTokenPort(ABC):
    """Port: Issue and consume verification tokens."""

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def create(self, token: VerificationToken) -> VerificationToken:
        """Store a freshly issued token."""
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def consume(self, identifier: str, token: str) -> Optional[VerificationToken]:
        """
        Atomically delete a token and return it.

        Returns:
            The consumed token, or None if the pair did not exist
        """
        pass
