"""
Verification Token Domain Model - one-time email / magic-link token.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class VerificationToken:
    """
    Token issued for email verification.

    Domain rules:
    - (identifier, token) is unique while unconsumed
    - consumed exactly once
    """
    identifier: str
    token: str
    expires: datetime
