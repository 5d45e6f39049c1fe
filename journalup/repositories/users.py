"""Credential store: users table access."""

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from journalup.core.errors import ConflictError, NotFoundError
from journalup.models import User


class UserRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def add(self, email: str, password_hash: str) -> User:
        """
        Insert a user and flush without committing, so the caller can commit it
        together with related rows. A taken email surfaces as ConflictError.
        """
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already registered") from e
        return user

    def create(self, email: str, password_hash: str) -> User:
        """Insert and commit a user on its own."""
        user = self.add(email, password_hash)
        self.db.commit()
        self.db.refresh(user)
        return user

    def rollback(self) -> None:
        """Abandon the current transaction (releases row locks and pending inserts)."""
        self.db.rollback()

    def find_by_email(self, email: str) -> User:
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFoundError("User")
        return user

    def find_by_email_for_update(self, email: str) -> User:
        """Like find_by_email, but locks the row until the current transaction ends."""
        user = (
            self.db.query(User)
            .filter(User.email == email)
            .with_for_update()
            .first()
        )
        if user is None:
            raise NotFoundError("User")
        return user

    def find_by_id(self, user_id: uuid.UUID) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User")
        return user

    def delete(self, user_id: uuid.UUID) -> None:
        """Administrative delete; owned sessions, metrics, journals and profile go with it."""
        user = self.find_by_id(user_id)
        self.db.delete(user)
        self.db.commit()
