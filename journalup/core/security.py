"""Password hashing, JWT issue/verify, and opaque session token generation."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from journalup.core.config import settings
from journalup.core.errors import AuthenticationError

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for email and password validation.
EMAIL_MAX_LEN = 320
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# 32 random bytes, URL-safe base64 (43 chars).
SESSION_TOKEN_BYTES = 32


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    id: str
    email: str


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def new_session_token() -> str:
    """Return a fresh opaque session token (distinct from the JWT)."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def create_access_token(
    user_id: str,
    email: str,
    now: datetime | None = None,
) -> str:
    """Create a JWT access token with sub (user id), email, iat and exp."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
        "iat": issued_at,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_access_token(token: str) -> TokenClaims:
    """
    Decode and validate a JWT; return the user id and email it carries.
    Raises AuthenticationError on bad signature, expiry, or incomplete payload.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token expired") from e
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid token") from e

    sub = payload.get("sub")
    email = payload.get("email")
    if not isinstance(sub, str) or not sub or not isinstance(email, str) or not email:
        raise AuthenticationError("Invalid token payload")
    return TokenClaims(id=sub, email=email)
