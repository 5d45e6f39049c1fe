"""ORM model for application users (credentials only; profile lives in user_info)."""

import uuid

from sqlalchemy import Column, DateTime, String, Uuid, func
from sqlalchemy.orm import relationship

from journalup.models.base import Base, utcnow


class User(Base):
    """
    User account for email/password authentication.

    password_hash is a bcrypt hash and is never returned by the API or logged.
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
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

    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan")
    metrics = relationship("Metric", cascade="all, delete-orphan")
    journals = relationship("Journal", back_populates="user", cascade="all, delete-orphan")
    settings = relationship("UserSettings", uselist=False, cascade="all, delete-orphan")
    info = relationship("UserInfo", uselist=False, cascade="all, delete-orphan")
