"""Tests for the colour palette."""

import json
from pathlib import Path

import pytest

from barelyml.formatting.ir import BLACK, Color
from barelyml.formatting.palette import DEFAULT_COLOURS, ColorPalette


class TestColorPalette:
    """Tests for the ColorPalette class."""

    def test_defaults(self):
        """Test the built-in palette."""
        palette = ColorPalette()

        assert len(palette) == len(DEFAULT_COLOURS)
        assert palette.resolve("red") == Color("FFAA0000")
        assert palette.default_color == BLACK

    def test_unknown_name(self):
        """Test that unknown names resolve to None."""
        palette = ColorPalette()

        assert palette.resolve("chartreuse") is None
        assert palette.resolve_or_default("chartreuse") == BLACK

    def test_names_are_case_sensitive(self):
        """Test that lookups are exact."""
        assert ColorPalette().resolve("Red") is None

    def test_replacement_is_whole(self):
        """Test that a custom mapping replaces the defaults."""
        palette = ColorPalette({"brand": "#123456"})

        assert "red" not in palette
        assert palette.resolve("brand") == Color("FF123456")

    def test_default_override(self):
        """Test the reserved "default" entry."""
        palette = ColorPalette({"default": "#F00"})

        assert palette.default_color == Color("FFFF0000")
        assert palette.resolve_or_default("nothing") == Color("FFFF0000")

    def test_invalid_entry_uses_default(self):
        """Test that a bad hex value resolves to the default colour."""
        palette = ColorPalette({"bad": "#GGG"})

        assert palette.resolve("bad") == BLACK

    def test_equality_and_hash(self):
        """Test value semantics."""
        assert ColorPalette({"a": "#000"}) == ColorPalette({"a": "#000"})
        assert hash(ColorPalette({"a": "#000"})) == hash(ColorPalette({"a": "#000"}))

    def test_from_json_file(self, tmp_path: Path):
        """Test loading a palette from JSON."""
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"sea": "#06C"}), encoding="utf-8")

        palette = ColorPalette.from_json_file(path)

        assert palette.resolve("sea") == Color("FF0066CC")

    def test_from_json_file_rejects_non_object(self, tmp_path: Path):
        """Test that a JSON list is rejected."""
        path = tmp_path / "palette.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            ColorPalette.from_json_file(path)
