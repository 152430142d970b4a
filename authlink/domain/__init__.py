"""
Domain Models - framework-facing records.

No infrastructure dependencies. Mapping to stored rows lives in
authlink.domain.mapping.
"""

from authlink.domain.user import AdapterUser, generate_user_id, is_usable_email
from authlink.domain.session import AdapterSession, SessionAndUser
from authlink.domain.account import AdapterAccount
from authlink.domain.authenticator import AdapterAuthenticator, parse_transports, format_transports
from authlink.domain.verification_token import VerificationToken
from authlink.domain.result import TolerantResult

__all__ = [
    "AdapterUser",
    "generate_user_id",
    "is_usable_email",
    "AdapterSession",
    "SessionAndUser",
    "AdapterAccount",
    "AdapterAuthenticator",
    "parse_transports",
    "format_transports",
    "VerificationToken",
    "TolerantResult",
]
