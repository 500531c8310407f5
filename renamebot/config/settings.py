"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotSettings(BaseSettings):
    """Discord bot configuration."""

    name: str = Field(default="RenameBot", description="Bot display name used in log lines")
    token: str = Field(
        default="",
        description="Discord bot token. Set via BOT__TOKEN or the top-level AUTH_TOKEN.",
    )

    model_config = SettingsConfigDict(env_prefix="BOT_")


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: Literal["development", "production"] = Field(
        default="production", description="Deployment environment"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    # Legacy toggles: any non-empty value switches them on
    auth_token: str = Field(default="", description="Discord bot token (AUTH_TOKEN)")
    debug: str = Field(default="", description="If non-empty, forces log_level=DEBUG")
    development: str = Field(
        default="", description="If non-empty, forces environment=development"
    )

    # Sub-configurations
    bot: BotSettings = Field(default_factory=BotSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _apply_toggles(self) -> "Settings":
        if self.auth_token and not self.bot.token:
            self.bot.token = self.auth_token
        if self.debug:
            self.log_level = "DEBUG"
        if self.development:
            self.environment = "development"
        return self


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Loaded settings instance
    """
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
