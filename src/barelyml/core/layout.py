"""Layout queries answered on behalf of a renderer.

Heights follow the geometry each block draws with: admonitions lose
room to their icon tab and side lines, list items to their indent and
label, and tables size themselves from their cells regardless of the
available width.
"""

from dataclasses import dataclass
from typing import Optional

from barelyml.blocks.images import PLACEHOLDER_HEIGHT, image_size
from barelyml.formatting.ir import (
    AdmonitionBlock,
    Block,
    Document,
    ImageBlock,
    ListItem,
    TableBlock,
    TextBlock,
)
from barelyml.formatting.metrics import TextMeasurer
from barelyml.formatting.options import ParseOptions


@dataclass(frozen=True)
class BlockPlacement:
    """Where a block sits within the laid out document."""

    block: Block
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.bottom


def _text_height(runs, width: float, options: ParseOptions, measurer: TextMeasurer) -> float:
    return measurer.measure(runs, options.font, max(width, 0.0)).height


def height_required(
    block: Block,
    width: float,
    options: Optional[ParseOptions] = None,
    measurer: Optional[TextMeasurer] = None,
) -> float:
    """Height a block needs when given ``width`` pixels.

    Args:
        block: Any block variant
        width: Available width in pixels
        options: Geometry constants (defaults apply when omitted)
        measurer: Text measurer; defaults to ``options.measurer``

    Returns:
        Required height in pixels
    """
    options = options or ParseOptions()
    measurer = measurer or options.measurer

    if isinstance(block, TextBlock):
        return _text_height(block.runs, width, options, measurer)

    if isinstance(block, AdmonitionBlock):
        text_width = width - options.icon_size - 2 * (
            options.admonition_margin + options.admonition_line_width
        )
        return _text_height(block.runs, text_width, options, measurer)

    if isinstance(block, ListItem):
        text_width = width - block.indent - block.label_gap
        return _text_height(block.runs, text_width, options, measurer)

    if isinstance(block, ImageBlock):
        if block.is_missing:
            return PLACEHOLDER_HEIGHT
        _, height = image_size(block.drawable, block.max_width, width)
        return height

    if isinstance(block, TableBlock):
        return _table_extent(block.row_heights, options)

    raise TypeError(f"Unknown block type: {type(block).__name__}")


def _table_extent(sizes: tuple[float, ...], options: ParseOptions) -> float:
    if not sizes:
        return 0.0
    step = 2 * options.table_margin + options.table_gap
    return sum(size + step for size in sizes) - options.table_gap


def table_width(block: TableBlock, options: Optional[ParseOptions] = None) -> float:
    """Natural width of a table including cell padding and gaps."""
    return _table_extent(block.column_widths, options or ParseOptions())


def layout_document(
    document: Document,
    width: float,
    options: Optional[ParseOptions] = None,
) -> list[BlockPlacement]:
    """Stack blocks top to bottom within ``width``.

    Tables may extend beyond the margin and start at x=0 with the full
    width; every other block is inset by the margin on both sides.
    """
    options = options or ParseOptions()
    placements: list[BlockPlacement] = []
    y = float(options.margin)
    for block in document:
        if block.can_extend_beyond_margin:
            x, block_width = 0.0, float(width)
        else:
            x, block_width = float(options.margin), float(width - 2 * options.margin)
        height = height_required(block, block_width, options)
        placements.append(BlockPlacement(block, x, y, block_width, height))
        y += height
    return placements


def content_height(
    document: Document,
    width: float,
    options: Optional[ParseOptions] = None,
) -> float:
    """Total height of the laid out document, margins included."""
    options = options or ParseOptions()
    placements = layout_document(document, width, options)
    top = placements[-1].bottom if placements else float(options.margin)
    return top + options.margin
