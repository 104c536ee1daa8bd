"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Wedding Planner"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database (unset -> in-memory storage)
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    # Session signing
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"

    # Sessions
    SESSION_COOKIE_NAME: str = "wedding_sid"
    SESSION_MAX_AGE_DAYS: int = 7
    SESSION_PRUNE_INTERVAL_HOURS: int = 24
    COOKIE_SECURE: bool = False

    # Password hashing (argon2id; memory cost in KiB)
    PASSWORD_TIME_COST: int = 3
    PASSWORD_MEMORY_COST: int = 65536
    PASSWORD_PARALLELISM: int = 4

    # When enabled, entity routes require a logged-in user
    REQUIRE_AUTH: bool = False

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:5173", "http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def session_max_age_seconds(self) -> int:
        return self.SESSION_MAX_AGE_DAYS * 24 * 60 * 60

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
