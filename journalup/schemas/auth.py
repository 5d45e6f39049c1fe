"""Request/response schemas for auth endpoints."""

import uuid

from pydantic import Field

from journalup.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from journalup.schemas.base import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupRequest(CamelModel):
    """Credentials for a new account."""

    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN, description="Email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )


class LoginRequest(CamelModel):
    """Credentials for login."""

    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN, description="Email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class UserOut(CamelModel):
    """Public user fields (never the password hash)."""

    id: uuid.UUID
    email: str


class AuthResponse(CamelModel):
    """Returned by signup and login. Send token as 'Authorization: Bearer <token>'
    and session_token as 'x-session-token' on every protected request."""

    success: bool = True
    token: str = Field(..., description="JWT access token")
    session_token: str = Field(..., description="Opaque session token")
    user: UserOut


class SuccessResponse(CamelModel):
    success: bool = True


class CurrentUser(CamelModel):
    """Authenticated user (id, email) for dependency injection."""

    id: uuid.UUID
    email: str
