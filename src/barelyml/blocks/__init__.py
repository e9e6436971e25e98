"""Per-block-type parsers used by the block segmenter."""

from barelyml.blocks.admonitions import (
    ADMONITION_PREFIXES,
    admonition_kind,
    is_admonition_line,
    parse_admonition,
)
from barelyml.blocks.images import parse_image_block, resolve_image
from barelyml.blocks.lists import BULLET, is_list_item, parse_list_item
from barelyml.blocks.tables import is_table_line, parse_table, split_row
from barelyml.blocks.text import parse_text_block

__all__ = [
    "ADMONITION_PREFIXES",
    "admonition_kind",
    "is_admonition_line",
    "parse_admonition",
    "parse_image_block",
    "resolve_image",
    "BULLET",
    "is_list_item",
    "parse_list_item",
    "is_table_line",
    "parse_table",
    "split_row",
    "parse_text_block",
]
