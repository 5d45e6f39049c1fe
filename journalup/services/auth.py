"""Auth orchestrator: signup, login, logout and session validation.

Authentication pairs a stateless bearer JWT with a server-side session token.
The JWT proves identity claims; the session row makes the pair revocable, so
deleting a user's sessions logs them out everywhere without a JWT denylist.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from journalup.core.errors import AuthenticationError, NotFoundError
from journalup.core.security import create_access_token, hash_password, verify_password
from journalup.models import User
from journalup.models.base import ensure_utc, utcnow
from journalup.repositories.sessions import SessionRepository
from journalup.repositories.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    """Credentials handed to the client after signup or login."""

    token: str
    session_token: str
    user: User


class AuthService:
    def __init__(self, users: UserRepository, sessions: SessionRepository) -> None:
        self.users = users
        self.sessions = sessions

    def signup(self, email: str, password: str) -> AuthResult:
        """
        Register a new user. Raises ConflictError if the email is already registered.

        The user row and its first session are committed together; if the session
        cannot be stored, the user is not stored either.
        """
        user = self.users.add(email, hash_password(password))
        try:
            session = self.sessions.create(user.id)
        except SQLAlchemyError:
            self.users.rollback()
            logger.exception("Signup failed while creating the first session")
            raise
        token = create_access_token(str(user.id), user.email)
        logger.info("User signed up", extra={"user_id": str(user.id)})
        return AuthResult(token=token, session_token=session.token, user=user)

    def login(self, email: str, password: str) -> AuthResult:
        """
        Authenticate by email and password and start a new session.

        Raises NotFoundError for an unknown email and AuthenticationError for a
        wrong password. Prior sessions of the user are replaced atomically; the
        user row stays locked until the replacement commits, so two concurrent
        logins cannot leave zero or two sessions behind.
        """
        user = self.users.find_by_email_for_update(email)
        if not verify_password(password, user.password_hash):
            self.users.rollback()
            logger.info("Login rejected: wrong password", extra={"user_id": str(user.id)})
            raise AuthenticationError("Invalid credentials")

        session = self.sessions.replace_for_user(user.id)
        token = create_access_token(str(user.id), user.email)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return AuthResult(token=token, session_token=session.token, user=user)

    def logout(self, session_token: str | None) -> None:
        """Delete the session; an absent or already-deleted token is a no-op."""
        if not session_token:
            return
        self.sessions.delete_by_token(session_token)

    def resolve_session(
        self,
        session_token: str,
        now: datetime | None = None,
    ) -> uuid.UUID | None:
        """Owner of the session if it exists and has not expired, else None. Never raises."""
        try:
            session = self.sessions.find_by_token(session_token)
        except NotFoundError:
            return None
        except SQLAlchemyError:
            logger.warning("Session lookup failed", exc_info=True)
            return None
        if (now or utcnow()) >= ensure_utc(session.expires_at):
            return None
        return session.user_id

    def validate_session(self, session_token: str, now: datetime | None = None) -> bool:
        """True iff the session exists and has not expired. Never raises."""
        return self.resolve_session(session_token, now) is not None
