"""
Mappings between adapter shapes and stored rows.

Each record has one function per direction. ``*_to_values`` produces the
column values for an insert; ``row_to_*`` accepts any object exposing the
columns as attributes (a SQLAlchemy ``Row`` or a plain namespace).
For every shared field, ``row_to_x(x_to_values(x))`` returns the input.
"""

from typing import Any, Dict, List, Tuple

from authlink.domain.account import AdapterAccount
from authlink.domain.authenticator import (
    AdapterAuthenticator,
    format_transports,
    parse_transports,
)
from authlink.domain.session import AdapterSession
from authlink.domain.user import AdapterUser
from authlink.domain.verification_token import VerificationToken

# adapter field -> users column
USER_FIELD_COLUMNS = {
    "id": "id",
    "email": "email",
    "email_verified": "email_verified_at",
    "name": "full_name",
    "image": "avatar",
}


def user_to_values(user: AdapterUser) -> Dict[str, Any]:
    return {
        column: getattr(user, field)
        for field, column in USER_FIELD_COLUMNS.items()
    }


def user_patch_values(user: AdapterUser) -> Dict[str, Any]:
    """Column values for an update: the id and unset (None) fields are skipped."""
    return {
        column: getattr(user, field)
        for field, column in USER_FIELD_COLUMNS.items()
        if field != "id" and getattr(user, field) is not None
    }


def normalize_user_patch(patch: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Translate a profile patch into AdapterUser field names.

    Keys may be AdapterUser fields (``image``) or users columns (``avatar``).
    The id is immutable and is never patched. Returns the translated patch
    and the sorted keys that matched neither.
    """
    column_fields = {column: field for field, column in USER_FIELD_COLUMNS.items()}
    translated: Dict[str, Any] = {}
    unknown: List[str] = []
    for key, value in patch.items():
        field = key if key in USER_FIELD_COLUMNS else column_fields.get(key)
        if field is None or field == "id":
            unknown.append(key)
        else:
            translated[field] = value
    return translated, sorted(unknown)


def row_to_user(row: Any) -> AdapterUser:
    return AdapterUser(
        **{field: getattr(row, column) for field, column in USER_FIELD_COLUMNS.items()}
    )


def session_to_values(session: AdapterSession) -> Dict[str, Any]:
    return {
        "session_token": session.session_token,
        "user_id": session.user_id,
        "expires": session.expires,
    }


def row_to_session(row: Any) -> AdapterSession:
    return AdapterSession(
        session_token=row.session_token,
        user_id=row.user_id,
        expires=row.expires,
    )


ACCOUNT_COLUMNS = (
    "user_id",
    "type",
    "provider",
    "provider_account_id",
    "refresh_token",
    "access_token",
    "expires_at",
    "token_type",
    "scope",
    "id_token",
    "session_state",
)


def account_to_values(account: AdapterAccount) -> Dict[str, Any]:
    return {column: getattr(account, column) for column in ACCOUNT_COLUMNS}


def row_to_account(row: Any) -> AdapterAccount:
    return AdapterAccount(**{column: getattr(row, column) for column in ACCOUNT_COLUMNS})


def authenticator_to_values(authenticator: AdapterAuthenticator) -> Dict[str, Any]:
    return {
        "credential_id": authenticator.credential_id,
        "user_id": authenticator.user_id,
        "provider_account_id": authenticator.provider_account_id,
        "credential_public_key": authenticator.credential_public_key,
        "counter": authenticator.counter,
        "credential_device_type": authenticator.credential_device_type,
        "credential_backed_up": authenticator.credential_backed_up,
        "transports": format_transports(authenticator.transports),
    }


def row_to_authenticator(row: Any) -> AdapterAuthenticator:
    return AdapterAuthenticator(
        credential_id=row.credential_id,
        user_id=row.user_id,
        provider_account_id=row.provider_account_id,
        credential_public_key=row.credential_public_key,
        counter=row.counter,
        credential_device_type=row.credential_device_type,
        credential_backed_up=row.credential_backed_up,
        transports=parse_transports(row.transports),
    )


def token_to_values(token: VerificationToken) -> Dict[str, Any]:
    return {
        "identifier": token.identifier,
        "token": token.token,
        "expires": token.expires,
    }


def row_to_token(row: Any) -> VerificationToken:
    return VerificationToken(
        identifier=row.identifier,
        token=row.token,
        expires=row.expires,
    )
