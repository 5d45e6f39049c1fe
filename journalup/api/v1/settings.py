"""User settings endpoints."""

from fastapi import APIRouter

from journalup.api.deps import SettingsServiceDep
from journalup.api.v1.auth import CurrentUserDep
from journalup.schemas.settings import SettingsOut, SettingsUpdate

router = APIRouter()


@router.get("", response_model=SettingsOut)
def read_settings(user: CurrentUserDep, settings_service: SettingsServiceDep) -> SettingsOut:
    """Return the caller's settings, creating defaults on first access."""
    return settings_service.get_user_settings(user.id)


@router.patch("", response_model=SettingsOut)
def update_settings(
    body: SettingsUpdate,
    user: CurrentUserDep,
    settings_service: SettingsServiceDep,
) -> SettingsOut:
    """Update any subset of the four settings sections."""
    return settings_service.update_settings(user.id, body)
