"""Data model and inline-level machinery for BarelyML.

The block segmenter lives in ``barelyml.formatting.parser``; it is not
re-exported here because it depends on ``barelyml.blocks``.
"""

from barelyml.formatting.ir import (
    TextStyle,
    Color,
    FontSpec,
    InlineRun,
    Link,
    ImageReference,
    Drawable,
    BlockHeader,
    TextBlock,
    AdmonitionKind,
    AdmonitionBlock,
    ImageBlock,
    ListItem,
    Cell,
    TableBlock,
    Block,
    Document,
)
from barelyml.formatting.palette import ColorPalette, DEFAULT_COLOURS
from barelyml.formatting.inline import InlineTokenizer, HEADING_SCALES
from barelyml.formatting.links import consume_link, contains_link, is_image_line
from barelyml.formatting.metrics import ApproximateTextMeasurer, Size, TextMeasurer
from barelyml.formatting.options import ParseOptions

__all__ = [
    "TextStyle",
    "Color",
    "FontSpec",
    "InlineRun",
    "Link",
    "ImageReference",
    "Drawable",
    "BlockHeader",
    "TextBlock",
    "AdmonitionKind",
    "AdmonitionBlock",
    "ImageBlock",
    "ListItem",
    "Cell",
    "TableBlock",
    "Block",
    "Document",
    "ColorPalette",
    "DEFAULT_COLOURS",
    "InlineTokenizer",
    "HEADING_SCALES",
    "consume_link",
    "contains_link",
    "is_image_line",
    "ApproximateTextMeasurer",
    "Size",
    "TextMeasurer",
    "ParseOptions",
]
