"""Named colour palette used to resolve ``<c:name>`` tags."""

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from barelyml.formatting.ir import BLACK, Color


# CGA 16-colour palette with a few extensions
DEFAULT_COLOURS: dict[str, str] = {
    "black": "#000",
    "blue": "#00A",
    "green": "#0A0",
    "cyan": "#0AA",
    "red": "#A00",
    "magenta": "#A0A",
    "brown": "#A50",
    "lightgray": "#AAA",
    "darkgray": "#555",
    "lightblue": "#55F",
    "lightgreen": "#5F5",
    "lightcyan": "#5FF",
    "lightred": "#F55",
    "lightmagenta": "#F5F",
    "yellow": "#FF5",
    "white": "#FFF",
    "orange": "#FA5",
    "pink": "#F5F",
    "darkyellow": "#AA0",
    "purple": "#A0F",
    "gray": "#777",
    "linkcolour": "#00A",
}

# Reserved names
DEFAULT_NAME = "default"
LINK_NAME = "linkcolour"


class ColorPalette:
    """Case-sensitive mapping from colour names to hex strings.

    A palette is never edited in place; build a new one to change it.
    The reserved name "default" overrides the default text colour and
    "linkcolour" controls the colour of link runs.
    """

    def __init__(self, colours: Optional[Mapping[str, str]] = None) -> None:
        source = DEFAULT_COLOURS if colours is None else colours
        self._colours = MappingProxyType(dict(source))

    @classmethod
    def from_json_file(cls, path: Path) -> "ColorPalette":
        """Load a palette from a JSON object of name -> hex string."""
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Palette file must contain a JSON object: {path}")
        return cls({str(k): str(v) for k, v in data.items()})

    @property
    def colours(self) -> Mapping[str, str]:
        return self._colours

    @property
    def default_color(self) -> Color:
        """Default text colour (black unless "default" is defined)."""
        if DEFAULT_NAME in self._colours:
            return Color.from_hex(self._colours[DEFAULT_NAME], BLACK)
        return BLACK

    def resolve(self, name: str, default: Optional[Color] = None) -> Optional[Color]:
        """Resolve a colour name, returning None when it is unknown."""
        if name not in self._colours:
            return None
        return Color.from_hex(self._colours[name], default or self.default_color)

    def resolve_or_default(self, name: str) -> Color:
        resolved = self.resolve(name)
        return resolved if resolved is not None else self.default_color

    def __contains__(self, name: object) -> bool:
        return name in self._colours

    def __getitem__(self, name: str) -> str:
        return self._colours[name]

    def __len__(self) -> int:
        return len(self._colours)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPalette):
            return NotImplemented
        return dict(self._colours) == dict(other._colours)

    def __hash__(self) -> int:
        return hash(frozenset(self._colours.items()))

    def __repr__(self) -> str:
        return f"ColorPalette({len(self._colours)} colours)"
