"""User profile service: validation on top of UserInfoRepository."""

import uuid
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from journalup.core.errors import ValidationError
from journalup.models import UserInfo
from journalup.repositories.user_info import UserInfoRepository
from journalup.schemas.user_info import GrowthGoals, UserInfoCreate, UserInfoUpdate


def _validate_names(first_name: str | None, last_name: str | None) -> None:
    if first_name is not None and not first_name.strip():
        raise ValidationError("First name cannot be empty")
    if last_name is not None and not last_name.strip():
        raise ValidationError("Last name cannot be empty")


def _validate_timezone(timezone: str | None) -> None:
    if timezone is None:
        return
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError("Invalid timezone format") from e


class UserInfoService:
    def __init__(self, repository: UserInfoRepository) -> None:
        self.repository = repository

    def create_user_info(self, user_id: uuid.UUID, data: UserInfoCreate) -> UserInfo:
        _validate_names(data.first_name, data.last_name)
        _validate_timezone(data.timezone)
        return self.repository.create(
            user_id,
            first_name=data.first_name.strip(),
            last_name=data.last_name.strip(),
            bio=data.bio,
            timezone=data.timezone or "UTC",
            growth_goals=(data.growth_goals or GrowthGoals()).model_dump(by_alias=True),
        )

    def get_user_info(self, user_id: uuid.UUID) -> UserInfo:
        return self.repository.find_by_user_id(user_id)

    def update_user_info(self, user_id: uuid.UUID, data: UserInfoUpdate) -> UserInfo:
        fields = data.model_dump(exclude_unset=True)
        if not fields:
            raise ValidationError("No update data provided")
        _validate_names(data.first_name, data.last_name)
        _validate_timezone(data.timezone)
        for name in ("first_name", "last_name"):
            if fields.get(name) is not None:
                fields[name] = fields[name].strip()
            elif name in fields:
                raise ValidationError("Names cannot be null")
        if "timezone" in fields and fields["timezone"] is None:
            raise ValidationError("Invalid timezone format")
        if data.growth_goals is not None:
            fields["growth_goals"] = data.growth_goals.model_dump(by_alias=True)
        return self.repository.update(user_id, **fields)

    def delete_user_info(self, user_id: uuid.UUID) -> None:
        self.repository.delete(user_id)
