"""Conversion between DokuWiki and BarelyML."""

import re

from barelyml.formats.base import (
    MARKUP_AND_TAG_SPANS,
    MAX_LIST_LEVEL,
    NO_COUNTERS,
    DialectConverter,
    advance_counters,
    barelyml_heading,
    barelyml_list_line,
    join_lines,
    parse_barelyml_list,
    reset_counters_from,
    rewrite_outside,
    split_lines,
)


# Number of "=" for a level 1 heading; level n uses HEADING_EQUALS + 1 - n
HEADING_EQUALS = 6

DW_HEADING = re.compile(r"^\s*(={2,})\s*(.+?)\s*={2,}\s*$")
DW_LIST_ITEM = re.compile(r"^([ \t]{2,})([*-]) (.*)$")
DW_COLOR_OPEN = re.compile(r"<color\s+([^>/]*?)\s*(?:/[^>]*)?>")
DW_COLOR_CLOSE = "</color>"
DW_IMAGE = re.compile(r"\{\{\s*(.*?)\s*\}\}")
# "//" after ":" belongs to a URL, not to italics
DW_ITALIC = re.compile(r"(?<!:)//")

BML_COLOR_NAMED = re.compile(r"<c:([^>]*)>")
BML_COLOR_HEX = re.compile(r"<c(#[^>]*)>")
BML_COLOR_CLOSE = "</c>"


def _dw_heading_level(equals: int) -> int:
    """Map a count of "=" (2-6, more collapses to 6) to levels 5..1."""
    return HEADING_EQUALS + 1 - min(equals, HEADING_EQUALS)


def _dw_list_level(indent: str) -> int:
    spaces = len(indent.replace("\t", "  "))
    return max(1, min(spaces // 2, MAX_LIST_LEVEL))


def _dw_color(match: re.Match) -> str:
    value = match.group(1).strip()
    if value.startswith("#"):
        return f"<c{value}>"
    return f"<c:{value}>"


def _dw_inline(text: str) -> str:
    text = text.replace("**", "*")
    text = DW_ITALIC.sub("_", text)
    return text.replace("__", "")


def _convert_dw_line(
    line: str,
    counters: tuple[int, ...],
) -> tuple[str, tuple[int, ...]]:
    """Rewrite one DokuWiki line, threading the ordered-list counters."""
    heading = DW_HEADING.match(line)
    item = DW_LIST_ITEM.match(line)
    if heading and heading.group(2):
        level = _dw_heading_level(len(heading.group(1)))
        line = "#" * level + " " + heading.group(2)
        counters = NO_COUNTERS
    elif item:
        level = _dw_list_level(item.group(1))
        if item.group(2) == "-":
            counters, number = advance_counters(counters, level)
            line = barelyml_list_line(level, item.group(3), number)
        else:
            counters = reset_counters_from(counters, level)
            line = barelyml_list_line(level, item.group(3))
    else:
        counters = NO_COUNTERS

    line = DW_COLOR_OPEN.sub(_dw_color, line)
    line = line.replace(DW_COLOR_CLOSE, BML_COLOR_CLOSE)
    line = DW_IMAGE.sub(lambda m: "{{" + m.group(1) + "}}", line)
    line = rewrite_outside(line, _dw_inline, MARKUP_AND_TAG_SPANS)
    return line, counters


def dokuwiki_to_barelyml(dw: str) -> str:
    """Convert DokuWiki text to BarelyML.

    Handles:
    - ``====== h ======`` .. ``== h ==`` -> ``#`` .. ``#####``
    - ``  * item`` / ``  - item`` lists indented by 2, 4, 6, 8 or 10 spaces
    - ``**bold**`` -> ``*bold*``, ``//italic//`` -> ``_italic_``
    - ``<color name>``/``<color #hex>``/``</color>`` -> ``<c:name>``/``<c#hex>``/``</c>``

    Ordered items are numbered with one counter per nesting level. An
    item resets the counters of deeper levels; any non-list line resets
    them all.
    """
    output: list[str] = []
    counters = NO_COUNTERS
    for line in split_lines(dw):
        line, counters = _convert_dw_line(line, counters)
        output.append(line)
    return join_lines(output)


def _bml_inline(text: str) -> str:
    text = text.replace("*", "**")
    return text.replace("_", "//")


def _convert_bml_line(line: str) -> str:
    line = rewrite_outside(line, _bml_inline, MARKUP_AND_TAG_SPANS)
    line = BML_COLOR_NAMED.sub(lambda m: f"<color {m.group(1)}>", line)
    line = BML_COLOR_HEX.sub(lambda m: f"<color {m.group(1)}>", line)
    line = line.replace(BML_COLOR_CLOSE, DW_COLOR_CLOSE)

    heading = barelyml_heading(line)
    if heading:
        level, text = heading
        equals = "=" * (HEADING_EQUALS + 1 - level)
        return f"{equals} {text} {equals}"

    item = parse_barelyml_list(line)
    if item:
        marker = "-" if item.ordered else "*"
        return "  " * item.level + f"{marker} {item.text}"
    return line


def barelyml_to_dokuwiki(bml: str) -> str:
    """Convert BarelyML text to DokuWiki.

    Ordered list numbers are dropped because DokuWiki numbers items itself.
    """
    return join_lines([_convert_bml_line(line) for line in split_lines(bml)])


class DokuWikiConverter(DialectConverter):
    """Converter for DokuWiki markup."""

    @property
    def name(self) -> str:
        return "dokuwiki"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".dokuwiki", ".dw")

    def to_barelyml(self, text: str) -> str:
        return dokuwiki_to_barelyml(text)

    def from_barelyml(self, text: str) -> str:
        return barelyml_to_dokuwiki(text)
