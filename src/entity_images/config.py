# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to field kinds, embed policy, file URL and logging settings

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ENTITY_IMAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Field classification
    image_field_type: str = Field(default="image", description="Field kind holding direct image references")
    text_field_types: list[str] = Field(
        default_factory=lambda: ["text", "text_long", "text_with_summary"],
        description="Field kinds scanned for embedded <img> tags",
    )

    # Embedded image resolution
    uuid_attribute: str = Field(
        default="data-entity-uuid", description="<img> attribute carrying the embedded file UUID"
    )
    missing_uuid_policy: Literal["skip", "error"] = Field(
        default="skip", description="What to do with an <img> tag that has no UUID attribute"
    )

    # File URL generation
    base_url: str = Field(default="http://localhost", description="Base URL that public file URLs are built on")
    stream_wrappers: dict[str, str] = Field(
        default_factory=lambda: {"public": "sites/default/files"},
        description="Stream wrapper scheme to site-relative directory mapping",
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
