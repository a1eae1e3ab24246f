"""Configuration management for the User Registry service."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # src/user_registry/config.py -> project root
    project_dir = Path(__file__).parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "User API"
    app_version: str = "1.0.0"
    app_description: str = "Users API along with Validation, Sanitization, and Swagger Documentation"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Public base URL listed under "servers" in the OpenAPI document
    server_url: str | None = None

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
