"""Configuration loader for the content checker."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Content Checker"
    version: str = "1.0.0"


class CheckerConfig(BaseModel):
    """Content discovery and error policy configuration."""

    content_dir: str = "content"
    pattern: str = "*/*/*.md"
    max_errors: int = 3  # negative means unlimited
    skip_unparsable: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    checker: CheckerConfig = Field(default_factory=CheckerConfig)
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

    # Override from environment
    content_dir = os.getenv("CONTENT_DIR")
    if content_dir:
        config.checker.content_dir = content_dir

    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
