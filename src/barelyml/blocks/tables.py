"""Tables built from ``^`` (header) and ``|`` (body) delimited lines."""

from collections.abc import Sequence
from typing import Optional

from barelyml.blocks.images import image_size, resolve_image
from barelyml.formatting.ir import BlockHeader, Cell, Link, TableBlock
from barelyml.formatting.links import (
    LINK_CLOSE,
    LINK_OPEN,
    consume_link,
    contains_link,
    is_pure_image,
    parse_image_reference,
)
from barelyml.formatting.metrics import UNBOUNDED_WIDTH
from barelyml.formatting.options import ParseOptions


HEADER_DELIMITER = "^"
BODY_DELIMITER = "|"
DELIMITERS = HEADER_DELIMITER + BODY_DELIMITER


def is_table_line(line: str) -> bool:
    return line.startswith(HEADER_DELIMITER) or line.startswith(BODY_DELIMITER)


def _find_delimiter(line: str, start: int = 0) -> int:
    positions = [p for p in (line.find(d, start) for d in DELIMITERS) if p >= 0]
    return min(positions) if positions else -1


def _next_cell_end(line: str) -> int:
    """Index of the delimiter closing the first cell of ``line``.

    A ``|`` inside ``[[target|label]]`` does not end the cell: when the
    candidate cell holds an unterminated ``[[``, the search resumes after
    the matching ``]]``.
    """
    start = 0
    while True:
        idx = _find_delimiter(line, start)
        if idx < 0:
            return -1
        raw = line[:idx]
        opener = raw.rfind(LINK_OPEN)
        if opener < 0 or raw.find(LINK_CLOSE, opener + 2) >= 0:
            return idx
        close = line.find(LINK_CLOSE, opener + 2)
        if close < 0:
            return idx
        start = close + 2


def split_row(line: str) -> list[tuple[str, bool]]:
    """Split one table line into (raw cell text, is_header) pairs.

    Text after the last delimiter is ignored.
    """
    cells: list[tuple[str, bool]] = []
    while any(d in line for d in DELIMITERS):
        is_header = line.startswith(HEADER_DELIMITER)
        line = line[1:]
        end = _next_cell_end(line)
        if end < 0:
            break
        cells.append((line[:end], is_header))
        line = line[end:]
    return cells


def parse_cell(raw: str, is_header: bool, options: ParseOptions) -> Cell:
    """Parse the trimmed text of one cell into a Cell with its natural size."""
    text = raw.strip()
    link: Optional[Link] = None
    if contains_link(text):
        text, link = consume_link(text)

    font = options.font.boldened() if is_header else options.font

    if is_pure_image(text):
        reference = parse_image_reference(text)
        if reference is not None:
            drawable, message = resolve_image(reference, options)
            if drawable is not None:
                width, height = image_size(drawable, reference.max_width)
                return Cell(
                    link=link,
                    image=reference,
                    drawable=drawable,
                    is_header=is_header,
                    natural_width=width,
                    natural_height=height,
                )
            size = options.measurer.measure(message, font, UNBOUNDED_WIDTH)
            return Cell(
                runs=message,
                link=link,
                image=reference,
                is_header=is_header,
                natural_width=size.width,
                natural_height=size.height,
            )

    runs = options.tokenizer.tokenize(text, font)
    size = options.measurer.measure(runs, options.font, UNBOUNDED_WIDTH)
    return Cell(
        runs=runs,
        link=link,
        is_header=is_header,
        natural_width=size.width,
        natural_height=size.height,
    )


def parse_table(lines: Sequence[str], options: ParseOptions) -> TableBlock:
    """Parse contiguous table lines into a TableBlock.

    Column widths are the per-column maximum of natural cell widths and
    row heights the per-row maximum of natural cell heights. Rows with
    fewer cells than the widest row are kept as they are.
    """
    rows = tuple(
        tuple(parse_cell(raw, is_header, options) for raw, is_header in split_row(line))
        for line in lines
    )

    column_widths: list[float] = []
    for row in rows:
        for j, cell in enumerate(row):
            if j < len(column_widths):
                column_widths[j] = max(column_widths[j], cell.natural_width)
            else:
                column_widths.append(cell.natural_width)

    row_heights = tuple(
        max((cell.natural_height for cell in row), default=0.0) for row in rows
    )

    return TableBlock(
        rows=rows,
        column_widths=tuple(column_widths),
        row_heights=row_heights,
        header=BlockHeader(),
    )
