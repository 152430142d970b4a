"""
Session Port - Interface for session management.

Implementations:
- SQLSessionAdapter: relational store via SQLAlchemy
"""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from authlink.domain.session import AdapterSession, SessionAndUser
from authlink.ports.policy import AbsencePolicy, absence_policy


class SessionPort(ABC):
    """Port: Manage user sessions."""

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def create(self, session: AdapterSession) -> AdapterSession:
        """
        Persist a new session.

        Args:
            session: Session to store

        Returns:
            Persisted session

        Raises:
            PersistenceError: If the insert returned no row
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def get_with_user(self, session_token: str) -> Optional[SessionAndUser]:
        """
        Get a session joined with its user.

        Args:
            session_token: Session token

        Returns:
            Session and user if found, None otherwise
        """
        pass

    @absence_policy(AbsencePolicy.HARD_FAIL)
    @abstractmethod
    async def update(
        self,
        session_token: str,
        expires: Optional[datetime] = None,
        user_id: Optional[str] = None,
    ) -> AdapterSession:
        """
        Update the mutable fields of a session.

        Args:
            session_token: Token of the session to update
            expires: New expiry
            user_id: New owner

        Returns:
            Updated session

        Raises:
            PersistenceError: If no session matched the token
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def delete(self, session_token: str) -> None:
        """
        Delete a session. Deleting an absent token is not an error.

        Args:
            session_token: Session token
        """
        pass

    @absence_policy(AbsencePolicy.SOFT_NULL)
    @abstractmethod
    async def delete_by_user(self, user_id: str) -> int:
        """
        Delete all sessions of a user.

        Args:
            user_id: User ID

        Returns:
            Number of sessions deleted
        """
        pass
