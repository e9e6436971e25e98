"""Options passed explicitly into every parse."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from barelyml.formatting.inline import InlineTokenizer
from barelyml.formatting.ir import FontSpec
from barelyml.formatting.metrics import ApproximateTextMeasurer, TextMeasurer
from barelyml.formatting.palette import ColorPalette
if TYPE_CHECKING:
    from barelyml.config import Settings
    from barelyml.resources import ResourceSource


@dataclass(frozen=True)
class ParseOptions:
    """Configuration read (never mutated) during a parse.

    Attributes:
        palette: Colour names for ``<c:name>`` tags and admonition accents
        font: Base font for body text
        margin: Content margin in pixels
        indent_per_space: List indent per leading whitespace character
        label_gap: Space reserved for list labels
        icon_size: Admonition tab size
        admonition_margin: Gap between admonition tab and text
        admonition_line_width: Width of admonition side lines
        table_margin: Padding inside table cells
        table_gap: Gap between table cells
        resources: Image lookup; None means "no file source"
        measurer: Text measurement for natural cell sizes
    """

    palette: ColorPalette = field(default_factory=ColorPalette)
    font: FontSpec = field(default_factory=FontSpec)
    margin: int = 20
    indent_per_space: int = 15
    label_gap: int = 30
    icon_size: int = 20
    admonition_margin: int = 10
    admonition_line_width: int = 2
    table_margin: int = 10
    table_gap: int = 2
    resources: Optional["ResourceSource"] = None
    measurer: TextMeasurer = field(default_factory=ApproximateTextMeasurer)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ParseOptions":
        """Build options from application settings."""
        from barelyml.resources import DirectoryResourceSource

        palette = (
            ColorPalette.from_json_file(settings.palette_file)
            if settings.palette_file
            else ColorPalette()
        )
        resources = (
            DirectoryResourceSource(settings.image_dir) if settings.image_dir else None
        )
        return cls(
            palette=palette,
            font=FontSpec(name=settings.font_name, height=settings.font_height),
            margin=settings.margin,
            indent_per_space=settings.indent_per_space,
            label_gap=settings.label_gap,
            icon_size=settings.icon_size,
            admonition_margin=settings.admonition_margin,
            admonition_line_width=settings.admonition_line_width,
            table_margin=settings.table_margin,
            table_gap=settings.table_gap,
            resources=resources,
        )

    @property
    def tokenizer(self) -> InlineTokenizer:
        return InlineTokenizer(self.palette)
