"""Configuration loader for the reading tracker."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Reading Tracker"
    version: str = "1.0.0"


class StorageConfig(BaseModel):
    """Persistent store location."""

    sqlite_path: str = "./data/reading_tracker.db"


class CatalogConfig(BaseModel):
    """Remote book catalog (Google Books volumes API) settings."""

    base_url: str = "https://www.googleapis.com/books/v1"
    timeout: float | None = None  # None waits for the response indefinitely
    max_results: int = 20
    api_key: str | None = None


class ReadingConfig(BaseModel):
    """Reading-pace assumptions used by the statistics engine."""

    words_per_page: int = 250
    default_wpm: int = 200


class LoggingConfig(BaseModel):
    """Root logger configuration."""

    level: str = "INFO"
    json_format: bool = Field(default=False, alias="json")

    model_config = ConfigDict(populate_by_name=True)


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
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
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override the catalog key from environment
    api_key = os.getenv("GOOGLE_BOOKS_API_KEY")
    if api_key:
        config.catalog.api_key = api_key

    log_level = os.getenv("READING_TRACKER_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
