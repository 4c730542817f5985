"""Username/password checks against the plaintext and obfuscated user datasets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .data_store import CAMPAIGNS, ENCRYPTED_USERS, USERS, DataStore
from .errors import ApiError, AuthError, InternalError, NotFoundError, ValidationError
from .utils.obfuscate import decode

logger = logging.getLogger(__name__)

ROLE_ADMIN = "admin"
ROLE_USER = "user"


@dataclass(frozen=True)
class CredentialScheme:
    """How one protected route stores and compares passwords."""

    name: str
    dataset: str
    route: str
    sample_password: str
    compare: Callable[[str, str], bool]


def _plain_equal(stored: str, supplied: str) -> bool:
    return stored == supplied


def _decoded_equal(stored: str, supplied: str) -> bool:
    return decode(stored) == decode(supplied)


PLAINTEXT = CredentialScheme(
    name="plaintext",
    dataset=USERS,
    route="/simple-protected-data",
    sample_password="ahmedadmin123",
    compare=_plain_equal,
)

OBFUSCATED = CredentialScheme(
    name="obfuscated",
    dataset=ENCRYPTED_USERS,
    route="/encrypted-protected-data",
    sample_password="hotlkhktpu123",
    compare=_decoded_equal,
)


def user_summary(user: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": user.get("id"),
        "username": user.get("username"),
        "email": user.get("email"),
        "role": user.get("role"),
    }


def find_user(users_document: Dict[str, Any], username: str) -> Optional[Dict[str, Any]]:
    for user in users_document["users"]:
        if user.get("username") == username:
            return user
    return None


def _authorize(
    store: DataStore,
    scheme: CredentialScheme,
    username: Optional[str],
    password: Optional[str],
) -> Dict[str, Any]:
    if not username or not password:
        raise ValidationError(
            "Missing credentials",
            "Username and password query parameters are required",
            example=f"{scheme.route}?username=ahmed_hassan&password={scheme.sample_password}",
        )

    user = find_user(store.load(scheme.dataset), username)
    if user is None:
        logger.info("%s check: unknown username %r", scheme.name, username)
        raise NotFoundError("User not found", "User not found")

    stored = user.get("password")
    if stored is None or not scheme.compare(stored, password):
        logger.info("%s check: password mismatch for %r", scheme.name, username)
        raise AuthError("Invalid credentials", "User not found", status_code=401)

    role = user.get("role")
    if role == ROLE_ADMIN:
        return {
            "message": "Access granted - Admin user authenticated",
            "user": user_summary(user),
            "data": store.load(CAMPAIGNS),
        }
    if role == ROLE_USER:
        logger.info("%s check: %r denied, role=%s", scheme.name, username, role)
        raise AuthError(
            "Access denied",
            "User must be an admin to access this data.",
            status_code=403,
            user=user_summary(user),
        )
    logger.info("%s check: %r denied, unrecognized role=%r", scheme.name, username, role)
    raise AuthError("Access denied", "User not found", status_code=403)


def authorize(
    store: DataStore,
    scheme: CredentialScheme,
    username: Optional[str],
    password: Optional[str],
) -> Dict[str, Any]:
    """Check credentials and return the admin payload, or raise an ``ApiError``.

    Failures other than ``ApiError`` (unreadable or malformed datasets included)
    are logged and reported as a generic 500 without details.
    """
    try:
        return _authorize(store, scheme, username, password)
    except ApiError:
        raise
    except Exception:
        logger.exception("Error in %s credential check", scheme.name)
        raise InternalError()
