"""Document entry point, layout queries and link interaction."""

from barelyml.core.document import BarelyMLDocument, ParseOptions, parse_document
from barelyml.core.interaction import LinkActivator
from barelyml.core.layout import (
    BlockPlacement,
    content_height,
    height_required,
    layout_document,
    table_width,
)

__all__ = [
    "BarelyMLDocument",
    "ParseOptions",
    "parse_document",
    "LinkActivator",
    "BlockPlacement",
    "content_height",
    "height_required",
    "layout_document",
    "table_width",
]
