"""User settings store (one row per user, created lazily with defaults)."""

import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from journalup.models import UserSettings

# Stored JSON columns that may be patched.
SETTINGS_COLUMNS = (
    "notification_preferences",
    "theme_preferences",
    "privacy_settings",
    "ai_interaction_settings",
)


class SettingsRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_or_create(self, user_id: uuid.UUID) -> UserSettings:
        row = self.db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
        if row is not None:
            return row
        row = UserSettings(user_id=user_id)
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            # Created concurrently by another request.
            self.db.rollback()
            return self.db.query(UserSettings).filter(UserSettings.user_id == user_id).one()
        self.db.refresh(row)
        return row

    def update(self, user_id: uuid.UUID, changes: dict[str, dict[str, Any]]) -> UserSettings:
        """Merge each changed JSON column key-by-key into the stored document."""
        row = self.get_or_create(user_id)
        for column, values in changes.items():
            if column not in SETTINGS_COLUMNS:
                raise ValueError(f"Unknown settings column: {column}")
            # Assign a new dict so SQLAlchemy sees the change.
            setattr(row, column, {**(getattr(row, column) or {}), **values})
        self.db.commit()
        self.db.refresh(row)
        return row
