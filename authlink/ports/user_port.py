"""
User Port - Interface for resolving and maintaining stored users.

Implementations:
- SQLUserAdapter: relational store via SQLAlchemy
"""

from abc import ABC, abstractmethod
from typing import Optional
from authlink.domain.user import AdapterUser
from authlink.ports.policy import AbsencePolicy, absence_policy


class UserPort(ABC):
    """Port: Find-or-create and maintain users."""

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def resolve_or_create(self, identity: AdapterUser) -> AdapterUser:
        """
        Return the stored user for an external identity, creating it if needed.

        Lookup order is email (when non-blank), then provider_account_id as a
        user id. A found user is returned unchanged.

        Args:
            identity: External identity from the framework

        Returns:
            The existing or newly created user
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def get_by_email(self, email: Optional[str]) -> Optional[AdapterUser]:
        """
        Find a user by email.

        Args:
            email: Email address; blank values never reach storage

        Returns:
            User if found, None otherwise
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[AdapterUser]:
        """
        Find a user by id.

        Returns:
            User if found, None otherwise
        """
        pass

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def update(self, user: AdapterUser) -> AdapterUser:
        """
        Update profile fields of an existing user.

        Fields left as None are not written.

        Args:
            user: User carrying the id and the fields to change

        Returns:
            The updated user

        Raises:
            NotFoundError: "User not found"
            PersistenceError: "Failed to update user"
        """
        pass

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """
        Delete a user and, by cascade, its sessions, accounts and authenticators.

        Raises:
            NotFoundError: "Delete User not found"
        """
        pass
