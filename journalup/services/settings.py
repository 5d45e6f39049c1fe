"""Settings service: translate between the API shape and the stored JSON documents.

Stored shape (user_settings columns)      API shape
notification_preferences.emailNotifications  notificationPreferences.email
notification_preferences.pushNotifications   notificationPreferences.push
notification_preferences.reminderFrequency   aiInteractionSettings.reminderFrequency
theme_preferences.darkMode                    themePreferences.mode (dark/light)
privacy_settings.journalVisibility            privacySettings.shareProgress (public/private)
privacy_settings.shareAnalytics               privacySettings.allowAnalytics
ai_interaction_settings.enable*               aiInteractionSettings.suggestionsEnabled
"""

import uuid
from typing import Any

from journalup.models import UserSettings
from journalup.repositories.settings import SettingsRepository
from journalup.schemas.settings import (
    AiInteractionSettings,
    NotificationPreferences,
    PrivacySettings,
    SettingsOut,
    SettingsUpdate,
    ThemePreferences,
)


def to_api(row: UserSettings) -> SettingsOut:
    notifications = row.notification_preferences or {}
    theme = row.theme_preferences or {}
    privacy = row.privacy_settings or {}
    ai = row.ai_interaction_settings or {}
    return SettingsOut(
        user_id=row.user_id,
        notification_preferences=NotificationPreferences(
            email=notifications.get("emailNotifications", True),
            push=notifications.get("pushNotifications", True),
        ),
        theme_preferences=ThemePreferences(mode="dark" if theme.get("darkMode") else "light"),
        privacy_settings=PrivacySettings(
            share_progress=privacy.get("journalVisibility") == "public",
            allow_analytics=privacy.get("shareAnalytics", True),
        ),
        ai_interaction_settings=AiInteractionSettings(
            suggestions_enabled=ai.get("enableAiInsights", True),
            reminder_frequency=notifications.get("reminderFrequency", "daily"),
        ),
        updated_at=row.updated_at,
    )


def to_stored(update: SettingsUpdate) -> dict[str, dict[str, Any]]:
    """Partial stored documents for the sections present in the update."""
    changes: dict[str, dict[str, Any]] = {}
    if update.notification_preferences is not None:
        changes["notification_preferences"] = {
            "emailNotifications": update.notification_preferences.email,
            "pushNotifications": update.notification_preferences.push,
        }
    if update.theme_preferences is not None:
        changes["theme_preferences"] = {
            "darkMode": update.theme_preferences.mode == "dark",
        }
    if update.privacy_settings is not None:
        changes["privacy_settings"] = {
            "journalVisibility": "public" if update.privacy_settings.share_progress else "private",
            "shareAnalytics": update.privacy_settings.allow_analytics,
        }
    if update.ai_interaction_settings is not None:
        enabled = update.ai_interaction_settings.suggestions_enabled
        changes["ai_interaction_settings"] = {
            "enableAiInsights": enabled,
            "enableSentimentAnalysis": enabled,
            "enableGrowthSuggestions": enabled,
        }
        changes.setdefault("notification_preferences", {})["reminderFrequency"] = (
            update.ai_interaction_settings.reminder_frequency
        )
    return changes


class SettingsService:
    def __init__(self, repository: SettingsRepository) -> None:
        self.repository = repository

    def get_user_settings(self, user_id: uuid.UUID) -> SettingsOut:
        return to_api(self.repository.get_or_create(user_id))

    def update_settings(self, user_id: uuid.UUID, update: SettingsUpdate) -> SettingsOut:
        changes = to_stored(update)
        if not changes:
            return self.get_user_settings(user_id)
        return to_api(self.repository.update(user_id, changes))
