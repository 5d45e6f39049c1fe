"""ORM models for journals and their entries."""

import uuid

from sqlalchemy import Column, DateTime, Float, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import relationship

from journalup.models.base import Base, utcnow


class Journal(Base):
    """A titled journal owned by one user."""

    __tablename__ = "journals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
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

    user = relationship("User", back_populates="journals")
    entries = relationship(
        "Entry",
        back_populates="journal",
        cascade="all, delete-orphan",
        order_by="Entry.created_at",
    )


class Entry(Base):
    """
    A journal entry. sentiment_score (-1..1) is filled from the entry analyzer
    when the entry is written.
    """

    __tablename__ = "entries"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    journal_id = Column(
        Uuid,
        ForeignKey("journals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content = Column(Text, nullable=False)
    sentiment_score = Column(Float, nullable=True)
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

    journal = relationship("Journal", back_populates="entries")
