"""Plain text paragraphs."""

from collections.abc import Sequence
from typing import Optional

from barelyml.formatting.ir import BlockHeader, Link, TextBlock
from barelyml.formatting.options import ParseOptions


def parse_text_block(
    lines: Sequence[str],
    options: ParseOptions,
    link: Optional[Link] = None,
) -> TextBlock:
    """Tokenize a run of paragraph lines (headings included) into a TextBlock."""
    runs = options.tokenizer.tokenize(lines, options.font)
    return TextBlock(runs=runs, header=BlockHeader(link=link))
