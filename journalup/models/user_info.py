"""ORM model for user profile information."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid, func

from journalup.models.base import Base, utcnow
from journalup.models.settings import JSONType


def default_growth_goals() -> dict:
    return {"shortTerm": [], "longTerm": []}


class UserInfo(Base):
    """Profile (names, bio, timezone, growth goals); at most one per user."""

    __tablename__ = "user_info"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    timezone = Column(String(64), nullable=False, default="UTC", server_default="UTC")
    growth_goals = Column(JSONType, nullable=True, default=default_growth_goals)
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
