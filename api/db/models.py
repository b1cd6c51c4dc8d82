"""SQLAlchemy models for the user store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func

from .session import Base


class UserRecord(Base):
    __tablename__ = "users"

    # surrogate key keeps insertion order for listings
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(Integer, unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
