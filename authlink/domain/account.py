"""
Account Domain Model - a provider account linked to a user.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AdapterAccount:
    """
    Link between one provider account and one stored user.

    Domain rules:
    - (provider, provider_account_id) identifies at most one account
    - token fields are provider-issued and passed through unmodified
    """
    user_id: str
    type: str
    provider: str
    provider_account_id: str

    refresh_token: Optional[str] = None
    access_token: Optional[str] = None
    expires_at: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None
    session_state: Optional[str] = None
