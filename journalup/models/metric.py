"""ORM model for self-reported growth metrics (append-only)."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, Uuid, func

from journalup.models.base import Base, utcnow


class Metric(Base):
    """
    One (user, type, value) observation. value is 1-10, enforced by MetricsService.

    type is one of MetricType (resilience, learning, challenge, feedback, effort).
    """

    __tablename__ = "metrics"
    __table_args__ = (
        Index("ix_metrics_user_id_created_at", "user_id", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    type = Column(String(32), nullable=False)
    value = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
