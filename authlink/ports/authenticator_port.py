"""
Authenticator Port - Interface for passkey credential storage.

Implementations:
- SQLAuthenticatorAdapter: relational store via SQLAlchemy
"""

from abc import ABC, abstractmethod
from typing import List
from authlink.domain.authenticator import AdapterAuthenticator
from authlink.ports.policy import AbsencePolicy, absence_policy


class AuthenticatorPort(ABC):
    """Port: Store and look up WebAuthn authenticators.

    Lookups are only made when the framework already expects the
    credential to exist, so absence is a failure here.
    """

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def create(self, authenticator: AdapterAuthenticator) -> AdapterAuthenticator:
        """Register a credential."""
        pass

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def get_by_credential_id(self, credential_id: str) -> AdapterAuthenticator:
        """
        Get a credential by id.

        Raises:
            NotFoundError: "Failed to get authenticator"
        """
        pass

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[AdapterAuthenticator]:
        """
        List all credentials of a user.

        Raises:
            NotFoundError: "Failed to get authenticator list" if there are none
        """
        pass

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def update_counter(self, credential_id: str, counter: int) -> AdapterAuthenticator:
        """
        Persist a new signature counter.

        The value is stored as given; checking that it increased is up to
        the caller.

        Raises:
            ValueError: If counter is negative
            PersistenceError: "Failed to update authenticator counter"
        """
        pass
