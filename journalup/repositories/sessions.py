"""Session store: opaque, server-tracked session tokens."""

import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from journalup.core.errors import NotFoundError
from journalup.core.security import new_session_token
from journalup.models import UserSession
from journalup.models.base import utcnow


class SessionRepository:
    def __init__(self, db: Session, ttl: timedelta) -> None:
        self.db = db
        self.ttl = ttl

    def _build(self, user_id: uuid.UUID, now: datetime | None) -> UserSession:
        created = now or utcnow()
        return UserSession(
            user_id=user_id,
            token=new_session_token(),
            expires_at=created + self.ttl,
        )

    def create(self, user_id: uuid.UUID, now: datetime | None = None) -> UserSession:
        session = self._build(user_id, now)
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session

    def replace_for_user(self, user_id: uuid.UUID, now: datetime | None = None) -> UserSession:
        """Delete every session of the user and insert a fresh one in a single transaction."""
        self.db.query(UserSession).filter(UserSession.user_id == user_id).delete(
            synchronize_session=False
        )
        session = self._build(user_id, now)
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session

    def find_by_token(self, token: str) -> UserSession:
        session = self.db.query(UserSession).filter(UserSession.token == token).first()
        if session is None:
            raise NotFoundError("Session")
        return session

    def delete_by_token(self, token: str) -> int:
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.token == token)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def delete_by_user_id(self, user_id: uuid.UUID) -> int:
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def delete_expired(self, now: datetime | None = None) -> int:
        cutoff = now or utcnow()
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at < cutoff)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
