"""Application settings and configuration management."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        load_dotenv(".env", verbose=False)
except ImportError:
    # python-dotenv not available, continue without it
    pass


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Persistence
    database_path: str = Field(default="data/geoquiz.db", alias="GEOQUIZ_DATABASE_PATH")

    # Quiz configuration
    proximity_tolerance: float = Field(
        default=30.0, alias="GEOQUIZ_PROXIMITY_TOLERANCE", gt=0
    )
    regions_sample_size: int = Field(
        default=10, alias="GEOQUIZ_REGIONS_SAMPLE_SIZE", ge=0
    )
    places_sample_size: int = Field(
        default=15, alias="GEOQUIZ_PLACES_SAMPLE_SIZE", ge=0
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="GEOQUIZ_LOG_LEVEL")
    log_file: str = Field(default="logs/geoquiz.log", alias="GEOQUIZ_LOG_FILE")

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Configure root logging for the command line front-end.

    Args:
        level: Log level name, defaults to the configured ``log_level``
        log_file: Optional file to log into in addition to stderr
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
