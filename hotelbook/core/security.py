"""Password hashing, JWT creation/verification and access policies."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from hotelbook.core.config import settings
from hotelbook.core.errors import AuthenticationError
from hotelbook.schemas.auth import CurrentUser

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(
        pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    ).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str | int,
    is_admin: bool,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with sub (account id), is_admin, exp and iat."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "sub": str(sub),
        "is_admin": bool(is_admin),
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, is_admin, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def identity_from_token(token: str | None) -> CurrentUser:
    """
    Verify a bearer token and return the identity it asserts.

    Absent, badly signed, expired and malformed tokens all raise the same
    AuthenticationError so clients cannot tell them apart.
    """
    if not token:
        raise AuthenticationError()
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        raise AuthenticationError()
    is_admin = payload.get("is_admin", False)
    try:
        account_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError()
    if not isinstance(is_admin, bool):
        raise AuthenticationError()
    return CurrentUser(id=account_id, is_admin=is_admin)


def is_admin(identity: CurrentUser) -> bool:
    """Admin-only policy."""
    return identity.is_admin


def is_self_or_admin(identity: CurrentUser, account_id: int) -> bool:
    """Self-or-Admin policy: the caller owns the account or is an admin."""
    return identity.is_admin or identity.id == account_id
