"""
User Domain Model - the framework-facing user shape.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime
import secrets


@dataclass
class AdapterUser:
    """
    External identity as the authentication framework sees it.

    Domain rules:
    - id is immutable once the user is stored
    - email may be None or blank; blank emails are never used as a lookup key
    - provider_account_id is only meaningful on input to resolve-or-create
    """
    id: Optional[str] = None
    email: Optional[str] = None
    email_verified: Optional[datetime] = None
    name: Optional[str] = None
    image: Optional[str] = None

    provider_account_id: Optional[str] = None

    def has_email(self) -> bool:
        """Check if the identity carries a usable (non-blank) email."""
        return is_usable_email(self.email)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "id": self.id,
            "email": self.email,
            "email_verified": self.email_verified.isoformat() if self.email_verified else None,
            "name": self.name,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdapterUser":
        """Deserialize from dict."""
        return cls(
            id=data.get("id"),
            email=data.get("email"),
            email_verified=datetime.fromisoformat(data["email_verified"]) if data.get("email_verified") else None,
            name=data.get("name"),
            image=data.get("image"),
            provider_account_id=data.get("provider_account_id"),
        )


def is_usable_email(email: Optional[str]) -> bool:
    """Blank or whitespace-only emails count as absent."""
    return bool(email and email.strip())


def generate_user_id(prefix: str = "user") -> str:
    """Generate a fresh user id, e.g. ``user_Jx3k...``."""
    return f"{prefix}_{secrets.token_urlsafe(16)}"
