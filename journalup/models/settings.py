"""ORM model for per-user application settings (stored shape)."""

import uuid

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB

from journalup.models.base import Base, utcnow

# JSONB on Postgres, plain JSON elsewhere (tests run on SQLite).
JSONType = JSON().with_variant(JSONB(), "postgresql")


def default_notification_preferences() -> dict:
    return {
        "emailNotifications": True,
        "pushNotifications": True,
        "reminderFrequency": "daily",
    }


def default_theme_preferences() -> dict:
    return {"darkMode": False, "fontSize": "medium", "colorScheme": "default"}


def default_privacy_settings() -> dict:
    return {"journalVisibility": "private", "shareAnalytics": True}


def default_ai_interaction_settings() -> dict:
    return {
        "enableAiInsights": True,
        "enableSentimentAnalysis": True,
        "enableGrowthSuggestions": True,
    }


class UserSettings(Base):
    """
    One row per user. Each column is a JSON document; the API exposes a
    flattened view (see services.settings for the mapping).
    """

    __tablename__ = "user_settings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    notification_preferences = Column(
        JSONType, nullable=False, default=default_notification_preferences
    )
    theme_preferences = Column(JSONType, nullable=False, default=default_theme_preferences)
    privacy_settings = Column(JSONType, nullable=False, default=default_privacy_settings)
    ai_interaction_settings = Column(
        JSONType, nullable=False, default=default_ai_interaction_settings
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
    )
