"""ORM model for server-side sessions (revocable half of authentication)."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Uuid, func
from sqlalchemy.orm import relationship

from journalup.models.base import Base, utcnow


class UserSession(Base):
    """
    Opaque session token owned by a user, valid until expires_at.

    The token is sent as the x-session-token header next to the bearer JWT.
    Login replaces all of a user's rows, so at most one is active per user.
    """

    __tablename__ = "sessions"
    __table_args__ = (
        Index("ix_sessions_expires_at", "expires_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token = Column(String(128), nullable=False, unique=True, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
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

    user = relationship("User", back_populates="sessions")
