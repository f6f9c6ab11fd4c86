"""Configuration loader for the Reading Tracker application."""

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Reading Tracker"
    version: str = "1.0.0"
    language: str = "pt"


class StorageConfig(BaseModel):
    """Storage paths configuration."""

    sqlite_path: str = "./db/reading.db"


class ReadingConfig(BaseModel):
    """Reading session and pace configuration."""

    default_minutes_per_page: float = 2.5
    max_session_minutes: int = 1440


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    reading: ReadingConfig = Field(default_factory=ReadingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override from environment
    db_path = os.getenv("READING_TRACKER_DB_PATH")
    if db_path:
        config.storage.sqlite_path = db_path
    log_level = os.getenv("READING_TRACKER_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from the logging section.

    Args:
        config: LoggingConfig with level and format.
    """
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format,
    )
