"""
Security helpers for password hashing, JWT issuance and the admin guard.

Tokens are compact JSON Web Tokens signed with HMAC-SHA256.  They embed
the account's ``id``, ``username`` and ``role`` claims plus an ``exp``
timestamp, and are presented by clients as ``Authorization: Bearer
<token>``.  Passwords are stored as PBKDF2-HMAC-SHA256 digests with a
random per-password salt, serialized as ``"salthex$hashhex"``.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..utils.enums import UserRole
from .errors import AuthError, ForbiddenError

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    secret: str,
    expires_delta: Optional[int] = None,
) -> str:
    """Create a signed JWT with the given claims.

    Parameters
    ----------
    data : dict
        Claims to embed, e.g. ``{"id": 1, "username": "alice", "role": "user"}``.
    secret : str
        HMAC signing key.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to one hour.

    Returns
    -------
    str
        ``header.payload.signature``, each part base64url encoded.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta if expires_delta is not None else 60 * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret: str) -> Optional[Dict[str, Any]]:
    """Verify a JWT and return its claims, or ``None`` if it is invalid.

    A token is rejected when it is malformed, when its signature does
    not match ``secret`` or when its ``exp`` claim is missing or in the
    past.
    """
    try:
        parts = token.split(".")
        if len(parts) != 3:
            return None
        header_b64, payload_b64, signature_b64 = parts
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, secret)
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict):
            return None
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
        return data
    except (ValueError, TypeError, UnicodeDecodeError):
        # binascii.Error and json.JSONDecodeError are ValueError subclasses
        return None


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256 and a 16-byte salt."""
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored ``salt$hash`` string.

    Malformed stored values never match.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


# ---------------------------------------------------------------------------
# Bearer token dependencies
# ---------------------------------------------------------------------------

security = HTTPBearer(auto_error=False)


def get_token_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency returning the verified claims of the bearer token.

    Raises ``AuthError`` when the ``Authorization`` header is missing or
    the token is invalid or expired.
    """
    if credentials is None:
        raise AuthError("Unauthorized: No token provided.")
    claims = decode_access_token(credentials.credentials, request.app.state.settings.secret_key)
    if claims is None:
        logger.info("Rejected invalid or expired token on %s", request.url.path)
        raise AuthError("Unauthorized: Invalid token.")
    return claims


def require_admin(
    request: Request,
    claims: Dict[str, Any] = Depends(get_token_claims),
) -> Dict[str, Any]:
    """Admin guard.

    Allows the request only if the bearer token carries the ``admin``
    role, and attaches the decoded claims to ``request.state.admin``.
    """
    if claims.get("role") != UserRole.ADMIN.value:
        raise ForbiddenError("Forbidden: Not an admin.")
    request.state.admin = claims
    return claims


def admin_guard(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, Any]]:
    """Apply ``require_admin`` to a route when the guard is enforced.

    Routes conceptually reserved for administrators depend on this
    instead of ``require_admin`` directly so that wiring the guard is a
    deployment decision (``ENFORCE_ADMIN_GUARD``).  Returns ``None`` when
    the guard is disabled.
    """
    if not request.app.state.settings.enforce_admin_guard:
        return None
    return require_admin(request, get_token_claims(request, credentials))
