"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT creation/verification via PyJWT, one secret for access tokens and
  another for refresh tokens
- JTI generation for token identifiers
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Any

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from flask import current_app

from utils.exceptions import InvalidSignature, TokenExpired

logger = logging.getLogger(__name__)

ph = PasswordHasher()

ACCESS = "access"
REFRESH = "refresh"


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2 (salted, so never deterministic)."""
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a plaintext password against an Argon2 hash.

    Returns False on mismatch. A hash that cannot be parsed is also a failed
    verification, never an exception.
    """
    try:
        return ph.verify(password_hash, password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError):
        logger.warning("Stored password hash could not be verified")
        return False


def generate_jti() -> str:
    """Generate a unique JTI (JWT ID)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _secret_for(token_type: str) -> str:
    if token_type == REFRESH:
        return current_app.config["JWT_REFRESH_SECRET"]
    return current_app.config["JWT_SECRET"]


def _create_token(user_id: int, token_type: str, lifetime, now: datetime | None) -> str:
    issued_at = now or utcnow()
    exp = issued_at + lifetime
    payload = {
        "iss": current_app.config.get("JWT_ISSUER", "finance-ledger-api"),
        "sub": str(user_id),
        "id": int(user_id),
        "iat": int(issued_at.replace(tzinfo=timezone.utc).timestamp()),
        "exp": int(exp.replace(tzinfo=timezone.utc).timestamp()),
        "type": token_type,
        "jti": generate_jti(),
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=current_app.config["JWT_ALGORITHM"])


def create_access_token(user_id: int, now: datetime | None = None) -> str:
    """Short-lived token proving identity on protected routes."""
    return _create_token(user_id, ACCESS, current_app.config["ACCESS_TOKEN_EXPIRES"], now)


def create_refresh_token(user_id: int, now: datetime | None = None) -> str:
    """Long-lived token that can be exchanged once for a new pair.

    Pass the same `now` used for the ledger's expires_at so both agree.
    """
    return _create_token(user_id, REFRESH, current_app.config["REFRESH_TOKEN_EXPIRES"], now)


def decode_token(token: str, expected_type: str = ACCESS) -> Dict[str, Any]:
    """
    Decode and validate a JWT. Raises TokenExpired past exp and
    InvalidSignature for anything else (bad key, garbage, wrong type).
    expected type must be "access" or "refresh".
    """
    try:
        decoded = jwt.decode(
            token,
            _secret_for(expected_type),
            algorithms=[current_app.config["JWT_ALGORITHM"]],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpired("Token expired")
    except jwt.InvalidTokenError as exc:
        raise InvalidSignature(f"Invalid token: {exc}")

    if decoded.get("type") != expected_type:
        raise InvalidSignature("Wrong token type")
    if not isinstance(decoded.get("id"), int):
        raise InvalidSignature("Token has no user id")
    return decoded


def decode_access_token(token: str) -> Dict[str, Any]:
    return decode_token(token, expected_type=ACCESS)


def decode_refresh_token(token: str) -> Dict[str, Any]:
    return decode_token(token, expected_type=REFRESH)
