"""
Database engine and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from app.db.base import Base


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite shares a single connection."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine, class_=Session, autoflush=False, expire_on_commit=False
    )


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    # Register every table on Base.metadata before creating them
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
