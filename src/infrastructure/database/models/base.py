# src/infrastructure/database/models/base.py
"""
Base Database Model

Base class for all database models.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, DateTime, func

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """Base model with an immutable creation timestamp."""
    __abstract__ = True

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )
