"""Pydantic schemas for journals and entries."""

import uuid
from datetime import datetime

from pydantic import Field

from journalup.schemas.base import CamelModel


class JournalCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)


class JournalOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    created_at: datetime
    updated_at: datetime


class EntryCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=20000)


class EntryOut(CamelModel):
    id: uuid.UUID
    journal_id: uuid.UUID
    content: str
    sentiment_score: float | None = None
    created_at: datetime
    updated_at: datetime
