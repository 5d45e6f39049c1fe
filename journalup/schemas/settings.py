"""Pydantic schemas for user settings (API shape)."""

import uuid
from datetime import datetime
from typing import Literal

from journalup.schemas.base import CamelModel

ReminderFrequency = Literal["daily", "weekly", "monthly"]


class NotificationPreferences(CamelModel):
    email: bool
    push: bool


class ThemePreferences(CamelModel):
    mode: Literal["light", "dark"]


class PrivacySettings(CamelModel):
    share_progress: bool
    allow_analytics: bool


class AiInteractionSettings(CamelModel):
    suggestions_enabled: bool
    reminder_frequency: ReminderFrequency


class SettingsOut(CamelModel):
    user_id: uuid.UUID
    notification_preferences: NotificationPreferences
    theme_preferences: ThemePreferences
    privacy_settings: PrivacySettings
    ai_interaction_settings: AiInteractionSettings
    updated_at: datetime


class SettingsUpdate(CamelModel):
    """Body for PATCH /settings; omitted sections are left unchanged."""

    notification_preferences: NotificationPreferences | None = None
    theme_preferences: ThemePreferences | None = None
    privacy_settings: PrivacySettings | None = None
    ai_interaction_settings: AiInteractionSettings | None = None
