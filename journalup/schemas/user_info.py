"""Pydantic schemas for user profile information."""

import uuid
from datetime import datetime

from pydantic import Field

from journalup.schemas.base import CamelModel


class GrowthGoals(CamelModel):
    short_term: list[str] = Field(default_factory=list)
    long_term: list[str] = Field(default_factory=list)


class UserInfoCreate(CamelModel):
    first_name: str = Field(..., max_length=255)
    last_name: str = Field(..., max_length=255)
    bio: str | None = Field(default=None, max_length=4000)
    timezone: str | None = Field(default=None, max_length=64)
    growth_goals: GrowthGoals | None = None


class UserInfoUpdate(CamelModel):
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=4000)
    timezone: str | None = Field(default=None, max_length=64)
    growth_goals: GrowthGoals | None = None


class UserInfoOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    first_name: str
    last_name: str
    bio: str | None = None
    timezone: str
    growth_goals: GrowthGoals | None = None
    created_at: datetime
    updated_at: datetime
