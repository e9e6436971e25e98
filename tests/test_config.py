"""Tests for settings and their translation into parse options."""

import json
from pathlib import Path

import pytest

from barelyml import config
from barelyml.config import Settings, get_settings, load_settings
from barelyml.formatting.ir import Color
from barelyml.formatting.options import ParseOptions
from barelyml.resources import DirectoryResourceSource


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate the global settings instance and environment."""
    monkeypatch.setattr(config, "_settings", None)
    for name in ("BARELYML_MARGIN", "BARELYML_FONT_HEIGHT", "BARELYML_IMAGE_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self):
        """Test the default geometry."""
        settings = Settings()

        assert settings.margin == 20
        assert settings.font_height == 15.0
        assert settings.indent_per_space == 15
        assert settings.label_gap == 30
        assert settings.click_threshold == 20.0
        assert settings.image_dir is None

    def test_environment_override(self, monkeypatch):
        """Test BARELYML_ prefixed environment variables."""
        monkeypatch.setenv("BARELYML_MARGIN", "5")
        monkeypatch.setenv("BARELYML_FONT_HEIGHT", "12.5")

        settings = Settings()

        assert settings.margin == 5
        assert settings.font_height == 12.5

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one shared instance."""
        assert get_settings() is get_settings()

    def test_load_settings_from_env_file(self, tmp_path: Path):
        """Test reloading from a specific .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("BARELYML_LABEL_GAP=44\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.label_gap == 44
        assert get_settings() is settings


class TestParseOptionsFromSettings:
    """Tests for ParseOptions.from_settings."""

    def test_geometry_copied(self):
        """Test that numeric settings carry over."""
        options = ParseOptions.from_settings(Settings(margin=7, table_gap=3))

        assert options.margin == 7
        assert options.table_gap == 3
        assert options.font.height == 15.0
        assert options.resources is None

    def test_image_dir_and_palette(self, tmp_path: Path):
        """Test resource directory and palette file settings."""
        palette_file = tmp_path / "palette.json"
        palette_file.write_text(json.dumps({"brand": "#123"}), encoding="utf-8")

        options = ParseOptions.from_settings(
            Settings(image_dir=tmp_path, palette_file=palette_file)
        )

        assert isinstance(options.resources, DirectoryResourceSource)
        assert options.palette.resolve("brand") == Color("FF112233")
        assert "red" not in options.palette
