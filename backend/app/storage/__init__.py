"""
Storage backends: an in-memory store for development and tests, and a
relational store for production. Both satisfy ``app.storage.base.Storage``.
"""
from app.storage.base import EntityStore, SessionStore, Storage
from app.storage.database import DatabaseStorage
from app.storage.memory import MemStorage

__all__ = [
    "EntityStore",
    "SessionStore",
    "Storage",
    "DatabaseStorage",
    "MemStorage",
]
