"""
Session Domain Model - one active framework session.
"""

from dataclasses import dataclass
from typing import Optional
from datetime import datetime, timezone

from authlink.domain.user import AdapterUser


@dataclass
class AdapterSession:
    """
    Session entity.

    Domain rules:
    - session_token is opaque and unique
    - user_id references an existing user at creation time
    """
    session_token: str
    user_id: str
    expires: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the session has passed its expiry.

        Naive timestamps are treated as UTC.
        """
        now = now or datetime.now(timezone.utc)
        expires = self.expires
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now >= expires


@dataclass
class SessionAndUser:
    """A session joined with the user it belongs to."""
    session: AdapterSession
    user: AdapterUser
