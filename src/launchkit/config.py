"""Configuration management for launchkit."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .logging_utils import configure_logging
from .parsing.hints import DEFAULT_APP_DOMAIN
from .parsing.types import ParsingOptions, UserType


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHKIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default display options
    hide_code_blocks: bool = Field(default=True, description="Replace fenced code with a placeholder")
    hide_file_markers: bool = Field(default=True, description="Collapse embedded files into a manifest")
    show_technical_details: bool = Field(default=False, description="Keep code in a collapsible wrapper")
    user_type: UserType = Field(default="beginner", description="Persona used for placeholder phrasing")

    # Deployment
    app_domain: str = Field(default=DEFAULT_APP_DOMAIN, description="Domain hosting deployed apps")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")

    def parsing_options(self) -> ParsingOptions:
        return ParsingOptions(
            hide_code_blocks=self.hide_code_blocks,
            hide_file_markers=self.hide_file_markers,
            show_technical_details=self.show_technical_details,
            user_type=self.user_type,
        )


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance
    """
    # pydantic-settings loads LAUNCHKIT_* variables and the .env file
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid launchkit settings: {exc}") from exc

    configure_logging(settings.log_level)

    return settings
