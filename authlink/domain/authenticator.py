"""
Authenticator Domain Model - a WebAuthn passkey credential.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

TRANSPORT_SEPARATOR = ","


@dataclass
class AdapterAuthenticator:
    """
    Passkey credential registered for a user.

    Domain rules:
    - credential_id is unique
    - counter is non-negative; monotonicity is checked by the caller
    - transports is None when unknown and () when explicitly empty
    """
    credential_id: str
    user_id: str
    provider_account_id: str
    credential_public_key: str
    counter: int
    credential_device_type: str
    credential_backed_up: bool
    transports: Optional[Tuple[str, ...]] = None


def parse_transports(raw: Optional[str]) -> Optional[Tuple[str, ...]]:
    """
    Parse the stored transports column.

    None stays None, "" becomes (), "usb,nfc" becomes ("usb", "nfc").
    Order is kept and duplicates are dropped.
    """
    if raw is None:
        return None
    parts = (part.strip() for part in raw.split(TRANSPORT_SEPARATOR))
    return tuple(dict.fromkeys(part for part in parts if part))


def format_transports(transports: Optional[Iterable[str]]) -> Optional[str]:
    """Inverse of parse_transports."""
    if transports is None:
        return None
    return TRANSPORT_SEPARATOR.join(dict.fromkeys(transports))
