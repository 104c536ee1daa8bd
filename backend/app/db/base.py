"""
Declarative base shared by all ORM models.
"""
from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base, declared_attr

Base = declarative_base()

# Largest value a 64-bit signed INTEGER column can hold
MAX_ID = 2**63 - 1


class BaseModel(Base):
    """Abstract base adding the autoincrement integer primary key."""
    __abstract__ = True

    # SQLite otherwise hands the id of a deleted last row to the next insert
    @declared_attr
    def __table_args__(cls):
        return {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
