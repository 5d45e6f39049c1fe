"""Journal and entry store."""

import uuid

from sqlalchemy.orm import Session

from journalup.core.errors import NotFoundError
from journalup.models import Entry, Journal


class JournalRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user_id: uuid.UUID, title: str) -> Journal:
        journal = Journal(user_id=user_id, title=title)
        self.db.add(journal)
        self.db.commit()
        self.db.refresh(journal)
        return journal

    def find_by_id(self, journal_id: uuid.UUID) -> Journal:
        journal = self.db.query(Journal).filter(Journal.id == journal_id).first()
        if journal is None:
            raise NotFoundError("Journal")
        return journal

    def list_for_user(self, user_id: uuid.UUID) -> list[Journal]:
        return (
            self.db.query(Journal)
            .filter(Journal.user_id == user_id)
            .order_by(Journal.created_at)
            .all()
        )

    def create_entry(
        self,
        journal_id: uuid.UUID,
        content: str,
        sentiment_score: float | None = None,
    ) -> Entry:
        entry = Entry(journal_id=journal_id, content=content, sentiment_score=sentiment_score)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def list_entries(self, journal_id: uuid.UUID) -> list[Entry]:
        return (
            self.db.query(Entry)
            .filter(Entry.journal_id == journal_id)
            .order_by(Entry.created_at)
            .all()
        )
