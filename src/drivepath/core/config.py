"""
Configuration management for drivepath.

Uses pydantic-settings for environment variable binding.
All settings can be overridden via environment variables with DRIVEPATH_ prefix.
"""

import logging
import sys
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable binding."""

    model_config = SettingsConfigDict(
        env_prefix="DRIVEPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================
    # Remote Drive
    # ==========================================
    root_id: str = "root"
    """Reserved identifier of the root folder."""

    spaces: str = "drive"
    """Drive spaces searched by child lookups."""

    page_size: int | None = None
    """Page size for child lookups (service default when unset)."""

    supports_all_drives: bool = False
    """Send the shared drive flags on every request."""

    drive_id: str | None = None
    """Shared drive searched by child lookups (all drives when unset)."""

    # ==========================================
    # Uploads
    # ==========================================
    upload_chunk_size: int = 4194304
    """Chunk size in bytes for resumable uploads."""

    # ==========================================
    # Logging
    # ==========================================
    log_level: str = "INFO"
    log_file: Path | None = None


# Global settings instance
settings = Settings()


def setup_logging(level: str | None = None) -> None:
    """Configure application logging."""
    log_level = level or settings.log_level

    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
    ]

    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        handlers=handlers,
    )

    # Quiet noisy libraries
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)
    logging.getLogger("google_auth_httplib2").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(f"drivepath.{name}")
