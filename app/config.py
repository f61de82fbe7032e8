"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Database =====
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None
    DATABASE_HOST: str = os.getenv("DATABASE_HOST", "localhost")
    DATABASE_PORT: int = int(os.getenv("DATABASE_PORT", "3306"))
    DATABASE_USER: str = os.getenv("DATABASE_USER", "root")
    DATABASE_PASSWORD: str = os.getenv("DATABASE_PASSWORD", "")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "cities")

    # Choose SQLAlchemy repositories over the in-memory store
    USE_DB_REPOS: bool = os.getenv("USE_DB_REPOS", "true").lower() == "true"

    # ===== HTTP Surface =====
    API_PREFIX: str = os.getenv("API_PREFIX", "")
    CITIES_PATH: str = os.getenv("CITIES_PATH", "/cities")
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    INDEX_MESSAGE: str = os.getenv("INDEX_MESSAGE", "Hello fellow FastAPI developers!")

    # ===== Server =====
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        # Allow extra fields from .env that aren't defined here
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        """Explicit DATABASE_URL, or a MySQL URL built from the parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @property
    def cities_base_path(self) -> str:
        """Mount path of the city routes, e.g. ``/api/cities``."""
        return f"{self.API_PREFIX.rstrip('/')}/{self.CITIES_PATH.strip('/')}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance for easy import
settings = get_settings()
