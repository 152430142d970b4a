"""
Ports - Interfaces for users, sessions, accounts, authenticators and tokens.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from authlink.ports.policy import AbsencePolicy, absence_policy, policy_of
from authlink.ports.user_port import UserPort
from authlink.ports.session_port import SessionPort
from authlink.ports.account_port import AccountPort
from authlink.ports.authenticator_port import AuthenticatorPort
from authlink.ports.verification_token_port import VerificationTokenPort
from authlink.ports.tolerant_port import TolerantPort

__all__ = [
    # Absence policies
    "AbsencePolicy",
    "absence_policy",
    "policy_of",
    # Identity & sessions
    "UserPort",
    "SessionPort",
    "AccountPort",
    # Credentials & tokens
    "AuthenticatorPort",
    "VerificationTokenPort",
    # Tolerant operations
    "TolerantPort",
]
