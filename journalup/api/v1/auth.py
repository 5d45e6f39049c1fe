"""Signup/login/logout and the auth gate dependency (get_current_user)."""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request

from journalup.api.deps import AuthServiceDep
from journalup.core.errors import AuthenticationError
from journalup.core.security import verify_access_token
from journalup.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    SignupRequest,
    SuccessResponse,
    UserOut,
)
from journalup.services.auth import AuthResult

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        session_token=result.session_token,
        user=UserOut(id=result.user.id, email=result.user.email),
    )


@router.post("/signup", response_model=AuthResponse)
def signup(body: SignupRequest, auth_service: AuthServiceDep) -> AuthResponse:
    """
    Register with email and password; returns a JWT and a session token.
    A taken email returns 409.
    """
    return _auth_response(auth_service.signup(body.email, body.password))


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, auth_service: AuthServiceDep) -> AuthResponse:
    """
    Authenticate with email and password. Any earlier session of the user is ended.
    Include the token as 'Authorization: Bearer <token>' and the session token as
    'x-session-token' on protected requests.
    """
    return _auth_response(auth_service.login(body.email, body.password))


@router.post("/logout", response_model=SuccessResponse)
def logout(
    auth_service: AuthServiceDep,
    x_session_token: Annotated[str | None, Header()] = None,
) -> SuccessResponse:
    """End the session named by x-session-token. Always succeeds."""
    auth_service.logout(x_session_token)
    return SuccessResponse()


def get_current_user(
    request: Request,
    auth_service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
    x_session_token: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT plus a live session token of the same user.

    The session is checked first so revoked sessions are rejected without
    verifying the signature. Every failure is a 401 AuthenticationError.
    """
    if not authorization or not x_session_token:
        raise AuthenticationError("Missing authentication")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token:
        raise AuthenticationError("Invalid token format")

    session_user_id = auth_service.resolve_session(x_session_token)
    if session_user_id is None:
        logger.info("Rejected request: invalid or expired session", extra={"path": request.url.path})
        raise AuthenticationError("Invalid or expired session")

    try:
        claims = verify_access_token(token)
        user_id = uuid.UUID(claims.id)
    except (AuthenticationError, ValueError) as e:
        logger.info("Rejected request: invalid token", extra={"path": request.url.path})
        raise AuthenticationError("Invalid token") from e

    if user_id != session_user_id:
        logger.info("Rejected request: session belongs to another user", extra={"path": request.url.path})
        raise AuthenticationError("Session does not match token")

    current_user = CurrentUser(id=user_id, email=claims.email)
    request.state.user = current_user
    return current_user


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
