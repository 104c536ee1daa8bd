"""
Server-side login session model.
"""
from sqlalchemy import Column, String, JSON, Float
from app.db.base import Base


class SessionRecord(Base):
    """Opaque session payload keyed by session id."""
    __tablename__ = "sessions"

    sid = Column(String(128), primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(Float, nullable=False, index=True)  # unix timestamp
