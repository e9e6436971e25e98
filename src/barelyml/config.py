"""Configuration management for BarelyML."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARELYML_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base font
    font_name: str = ""
    font_height: float = Field(default=15.0, gt=0)

    # Content and table geometry (pixels)
    margin: int = Field(default=20, ge=0)
    table_margin: int = Field(default=10, ge=0)
    table_gap: int = Field(default=2, ge=0)

    # List indents
    indent_per_space: int = Field(default=15, ge=0)
    label_gap: int = Field(default=30, ge=0)

    # Admonitions
    icon_size: int = Field(default=20, ge=0)
    admonition_margin: int = Field(default=10, ge=0)
    admonition_line_width: int = Field(default=2, ge=0)

    # Pointer travel (pixels) below which a press/release counts as a click
    click_threshold: float = Field(default=20.0, gt=0)

    # Resources
    image_dir: Optional[Path] = None
    palette_file: Optional[Path] = None


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
