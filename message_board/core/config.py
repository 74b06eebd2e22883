"""
Application configuration using Pydantic Settings.

Centralizes all configuration with environment variable support.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/message_board.db"
    database_echo: bool = False  # Set to True for SQL debugging

    # Seed the messages table on bootstrap when it is empty
    seed_on_init: bool = False

    # Environment
    environment: str = "development"
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def is_production() -> bool:
    return get_settings().environment.lower() == "production"


def is_testing() -> bool:
    return get_settings().environment.lower() == "test"
