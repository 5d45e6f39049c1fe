"""Auth service and session store against an in-memory SQLite database."""

import unittest
from datetime import timedelta
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from journalup.core.errors import AuthenticationError, ConflictError, NotFoundError
from journalup.core.security import verify_access_token
from journalup.models import Base, User, UserSession
from journalup.models.base import utcnow
from journalup.repositories import SessionRepository, UserRepository
from journalup.services.auth import AuthService

SESSION_TTL = timedelta(days=7)


def _memory_session() -> Session:
    """Fresh in-memory database with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False)()


class AuthServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        rounds = patch("journalup.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)
        self.db = _memory_session()
        self.addCleanup(self.db.close)
        self.sessions = SessionRepository(self.db, SESSION_TTL)
        self.service = AuthService(UserRepository(self.db), self.sessions)

    def _session_count(self) -> int:
        return self.db.query(UserSession).count()


class TestSignup(AuthServiceTestCase):
    def test_signup_returns_token_for_new_user(self) -> None:
        result = self.service.signup("new@example.com", "password123")
        claims = verify_access_token(result.token)
        self.assertEqual(claims.id, str(result.user.id))
        self.assertEqual(claims.email, "new@example.com")
        self.assertTrue(self.service.validate_session(result.session_token))

    def test_duplicate_email_raises_conflict(self) -> None:
        self.service.signup("dup@example.com", "password123")
        with self.assertRaises(ConflictError) as ctx:
            self.service.signup("dup@example.com", "password456")
        self.assertEqual(ctx.exception.status_code, 409)

    def test_failed_session_insert_leaves_no_user(self) -> None:
        failure = OperationalError("INSERT INTO sessions", {}, Exception("disk full"))
        with patch.object(self.sessions, "create", side_effect=failure):
            with self.assertRaises(OperationalError):
                self.service.signup("retry@example.com", "password123")
        self.assertEqual(self.db.query(User).count(), 0)

        result = self.service.signup("retry@example.com", "password123")
        self.assertEqual(result.user.email, "retry@example.com")
        self.assertEqual(self._session_count(), 1)

    def test_password_is_not_stored_in_plain_text(self) -> None:
        result = self.service.signup("hash@example.com", "password123")
        self.assertNotEqual(result.user.password_hash, "password123")


class TestLogin(AuthServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.signup = self.service.signup("user@example.com", "password123")

    def test_unknown_email_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.service.login("nobody@example.com", "password123")

    def test_wrong_password_raises_authentication_error(self) -> None:
        with self.assertRaises(AuthenticationError) as ctx:
            self.service.login("user@example.com", "wrong-password")
        self.assertEqual(ctx.exception.message, "Invalid credentials")
        self.assertTrue(self.service.validate_session(self.signup.session_token))

    def test_login_replaces_previous_sessions(self) -> None:
        first = self.service.login("user@example.com", "password123")
        second = self.service.login("user@example.com", "password123")
        self.assertNotEqual(first.session_token, second.session_token)
        self.assertFalse(self.service.validate_session(self.signup.session_token))
        self.assertFalse(self.service.validate_session(first.session_token))
        self.assertTrue(self.service.validate_session(second.session_token))
        self.assertEqual(self._session_count(), 1)


class TestLogoutAndValidation(AuthServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.result = self.service.signup("user@example.com", "password123")

    def test_logout_ends_session_and_is_idempotent(self) -> None:
        self.service.logout(self.result.session_token)
        self.assertFalse(self.service.validate_session(self.result.session_token))
        self.service.logout(self.result.session_token)
        self.service.logout(None)
        self.assertEqual(self._session_count(), 0)

    def test_resolve_session_returns_owner(self) -> None:
        self.assertEqual(
            self.service.resolve_session(self.result.session_token), self.result.user.id
        )
        self.assertIsNone(self.service.resolve_session("no-such-token"))

    def test_unknown_token_is_invalid(self) -> None:
        self.assertFalse(self.service.validate_session("no-such-token"))

    def test_session_expires_after_ttl(self) -> None:
        later = utcnow() + SESSION_TTL + timedelta(minutes=1)
        self.assertTrue(self.service.validate_session(self.result.session_token))
        self.assertFalse(self.service.validate_session(self.result.session_token, now=later))


class TestSessionRepository(AuthServiceTestCase):
    def test_delete_expired_removes_only_past_sessions(self) -> None:
        user = self.service.signup("user@example.com", "password123").user
        other = self.service.signup("other@example.com", "password123").user
        self.sessions.create(user.id, now=utcnow() - timedelta(days=30))
        self.sessions.create(other.id, now=utcnow() - timedelta(days=30))
        self.assertEqual(self._session_count(), 4)

        deleted = self.sessions.delete_expired()

        self.assertEqual(deleted, 2)
        self.assertEqual(self._session_count(), 2)
        self.assertEqual(self.sessions.delete_expired(), 0)

    def test_delete_by_user_id_returns_count(self) -> None:
        user = self.service.signup("user@example.com", "password123").user
        self.sessions.create(user.id)
        self.assertEqual(self.sessions.delete_by_user_id(user.id), 2)
        self.assertEqual(self.sessions.delete_by_user_id(user.id), 0)

    def test_find_by_token_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.sessions.find_by_token("missing")
