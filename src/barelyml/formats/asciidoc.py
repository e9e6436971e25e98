"""Conversion between AsciiDoc and BarelyML."""

import re
from dataclasses import dataclass, field
from typing import Optional

from barelyml.blocks.tables import split_row
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


TABLE_DELIMITER = "|==="
# URLs AsciiDoc recognizes without a "link:" macro
BARE_URL_SCHEMES = ("http://", "https://", "mailto:")

AD_HEADING = re.compile(r"^(={1,6}) (.*?)(?: =+)?$")
AD_ORDERED = re.compile(r"^\s*(\.{1,5}) (.*)$")
AD_UNORDERED = re.compile(r"^\s*(\*{1,5}|-) (.*)$")
AD_ATTRIBUTES = re.compile(r"^\[(.*)\]$")
AD_COLS = re.compile(r"cols\s*=\s*\"?(\d+)\*")
AD_COLS_LIST = re.compile(r"cols\s*=\s*\"([^\"]*)\"")
AD_IMAGE = re.compile(r"image::?(?P<file>[^\s\[]+)\[(?P<attrs>[^\]]*)\]")
AD_LINK = re.compile(
    r"(?:(?<![\w/])link:(?P<target>[^\s\[]+)"
    r"|(?:(?<=[ \t])|^)(?P<url>(?:https?://|mailto:)[^\s\[]+))"
    r"(?:\[(?P<label>[^\]]*)\])?"
)
AD_ROLE = re.compile(r"\[(?P<role>[A-Za-z][\w-]*)\]#(?P<text>[^#]*)#")

# AsciiDoc admonition label -> BarelyML admonition label
ADMONITIONS_TO_BML = {
    "NOTE": "INFO",
    "TIP": "HINT",
    "IMPORTANT": "IMPORTANT",
    "CAUTION": "CAUTION",
    "WARNING": "WARNING",
}
ADMONITIONS_FROM_BML = {bml: ad for ad, bml in ADMONITIONS_TO_BML.items()}

BML_LINK = re.compile(r"\[\[(.*?)\]\]")
BML_IMAGE = re.compile(r"\{\{([^}?]*)(?:\?(\d*)[^}]*)?\}\}")
BML_COLOR_TAG = re.compile(r"<c:(?P<name>[^>]*)>|<c#[^>]*>|</c>")


# =============================================================================
# AsciiDoc -> BarelyML
# =============================================================================

def _ad_image(match: re.Match) -> str:
    attrs = [a.strip() for a in match.group("attrs").split(",")]
    width = None
    target = None
    for i, attr in enumerate(attrs):
        if attr.startswith("width="):
            width = attr[len("width="):].strip('"')
        elif attr.startswith("link="):
            target = attr[len("link="):].strip('"')
        elif i == 1 and attr.isdigit():
            width = attr
    if width and width.isdigit():
        image = "{{" + match.group("file") + "?" + width + "}}"
    else:
        image = "{{" + match.group("file") + "}}"
    if target:
        return f"[[{target}|{image}]]"
    return image


def _ad_link(match: re.Match) -> str:
    target = match.group("target") or match.group("url")
    label = (match.group("label") or "").strip()
    if label:
        return f"[[{target}|{label}]]"
    return f"[[{target}]]"


def _ad_style(text: str) -> str:
    return text.replace("**", "*").replace("__", "_")


def _ad_inline(line: str) -> str:
    """Rewrite images, links, roles and constrained/unconstrained emphasis."""
    line = AD_IMAGE.sub(_ad_image, line)
    line = AD_LINK.sub(_ad_link, line)
    line = AD_ROLE.sub(lambda m: f"<c:{m.group('role')}>{m.group('text')}</c>", line)
    return rewrite_outside(line, _ad_style, MARKUP_AND_TAG_SPANS)


def _column_count(attributes: str) -> Optional[int]:
    match = AD_COLS.search(attributes)
    if match:
        return int(match.group(1))
    match = AD_COLS_LIST.search(attributes)
    if match:
        return len([c for c in match.group(1).split(",") if c.strip()])
    return None


@dataclass
class _AsciiTable:
    """Rows collected between two ``|===`` lines."""

    header: bool = False
    columns: Optional[int] = None
    rows: list[list[str]] = field(default_factory=list)
    pending: list[str] = field(default_factory=list)
    source_lines: int = 0

    def add_line(self, line: str) -> None:
        self.source_lines += 1
        stripped = line.strip()
        if stripped.startswith("|"):
            cells = [cell.strip() for cell in stripped.split("|")[1:]]
            if self.columns is None:
                self.columns = max(1, len(cells))
            self.pending.extend(cells)
            self._complete_rows()
        elif self.pending:
            # continuation of the last cell
            self.pending[-1] = (self.pending[-1] + " " + stripped).strip()
        elif self.rows:
            self.rows[-1][-1] = (self.rows[-1][-1] + " " + stripped).strip()

    def add_blank(self) -> None:
        # a blank line right after a one-line first row marks it as header
        if len(self.rows) == 1 and not self.pending and self.source_lines == 1:
            self.header = True

    def _complete_rows(self) -> None:
        while self.columns and len(self.pending) >= self.columns:
            self.rows.append(self.pending[:self.columns])
            self.pending = self.pending[self.columns:]

    def to_barelyml(self) -> list[str]:
        rows = list(self.rows)
        if self.pending:
            rows.append(self.pending)
        lines = []
        for i, row in enumerate(rows):
            cells = [_ad_inline(cell) for cell in row]
            delimiter = "^" if self.header and i == 0 else "|"
            lines.append(delimiter + "".join(f" {c} {delimiter}" for c in cells))
        return lines


def asciidoc_to_barelyml(ad: str) -> str:
    """Convert AsciiDoc text to BarelyML.

    Handles:
    - ``=`` .. ``=====`` headings -> ``#`` .. ``#####``
    - ``.`` .. ``.....`` ordered and ``*`` .. ``*****`` unordered lists
    - ``|===`` tables, including cells spread over several lines
    - ``NOTE:``/``TIP:`` -> ``INFO:``/``HINT:`` admonitions
    - bare ``http(s)://``/``mailto:`` links with an optional ``[label]``
    - ``[role]#text#`` -> ``<c:role>text</c>``
    """
    lines = split_lines(ad)
    output: list[str] = []
    counters = NO_COUNTERS
    table: Optional[_AsciiTable] = None
    attributes = ""

    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        if table is not None:
            if stripped == TABLE_DELIMITER:
                output.extend(table.to_barelyml())
                table = None
            elif not stripped:
                table.add_blank()
            else:
                table.add_line(line)
            i += 1
            continue

        attr_match = AD_ATTRIBUTES.match(stripped)
        if (
            attr_match
            and i + 1 < len(lines)
            and lines[i + 1].strip() == TABLE_DELIMITER
        ):
            attributes = attr_match.group(1)
            i += 1
            continue

        if stripped == TABLE_DELIMITER:
            table = _AsciiTable(
                header="header" in attributes,
                columns=_column_count(attributes),
            )
            attributes = ""
            counters = NO_COUNTERS
            i += 1
            continue

        line, counters = _convert_ad_line(line, counters)
        output.append(line)
        i += 1

    if table is not None:
        output.extend(table.to_barelyml())
    return join_lines(output)


def _convert_ad_line(
    line: str,
    counters: tuple[int, ...],
) -> tuple[str, tuple[int, ...]]:
    """Rewrite one AsciiDoc line outside tables, threading list counters."""
    heading = AD_HEADING.match(line)
    ordered = AD_ORDERED.match(line)
    unordered = AD_UNORDERED.match(line)

    if heading:
        level = min(len(heading.group(1)), MAX_LIST_LEVEL)
        return "#" * level + " " + _ad_inline(heading.group(2)), NO_COUNTERS
    if ordered:
        level = len(ordered.group(1))
        counters, number = advance_counters(counters, level)
        return barelyml_list_line(level, _ad_inline(ordered.group(2)), number), counters
    if unordered:
        marker = unordered.group(1)
        level = 1 if marker == "-" else len(marker)
        counters = reset_counters_from(counters, level)
        return barelyml_list_line(level, _ad_inline(unordered.group(2))), counters

    for label, bml_label in ADMONITIONS_TO_BML.items():
        if line.startswith(label + ": "):
            line = bml_label + ": " + line[len(label) + 2:]
            break
    return _ad_inline(line), NO_COUNTERS


# =============================================================================
# BarelyML -> AsciiDoc
# =============================================================================

def _bml_image(match: re.Match, block: bool = False) -> str:
    width = match.group(2)
    attrs = f"width={width}" if width else ""
    prefix = "image::" if block else "image:"
    return f"{prefix}{match.group(1)}[{attrs}]"


def _bml_links(line: str) -> str:
    parts: list[str] = []
    pos = 0
    for match in BML_LINK.finditer(line):
        parts.append(line[pos:match.start()])
        inner = match.group(1)
        target, label = inner.split("|", 1) if "|" in inner else (inner, "")
        image = BML_IMAGE.fullmatch(label.strip())
        so_far = "".join(parts)
        at_boundary = not so_far or so_far[-1] in " \t"
        if image:
            parts.append(f"image:{image.group(1)}[link={target}]")
        elif target.startswith(BARE_URL_SCHEMES) and at_boundary:
            parts.append(f"{target}[{label}]" if label else target)
        else:
            parts.append(f"link:{target}[{label}]")
        pos = match.end()
    parts.append(line[pos:])
    return "".join(parts)


def _bml_colors(line: str) -> str:
    """Map named colour spans to roles; hex colours cannot be expressed."""
    parts: list[str] = []
    pos = 0
    open_role = False
    for match in BML_COLOR_TAG.finditer(line):
        parts.append(line[pos:match.start()])
        if open_role:
            parts.append("#")
            open_role = False
        if match.group("name") is not None:
            parts.append(f"[{match.group('name')}]#")
            open_role = True
        pos = match.end()
    parts.append(line[pos:])
    if open_role:
        parts.append("#")
    return "".join(parts)


def _bml_inline(line: str) -> str:
    line = _bml_colors(line)
    line = _bml_links(line)
    if BML_IMAGE.fullmatch(line.strip()):
        return BML_IMAGE.sub(lambda m: _bml_image(m, block=True), line.strip())
    return BML_IMAGE.sub(_bml_image, line)


def _bml_table(lines: list[str]) -> list[str]:
    rows = [split_row(line) for line in lines]
    output: list[str] = []
    if rows and rows[0] and all(is_header for _, is_header in rows[0]):
        output.append("[%header]")
    output.append(TABLE_DELIMITER)
    for row in rows:
        output.append(" ".join(f"|{_bml_inline(raw.strip())}" for raw, _ in row))
    output.append(TABLE_DELIMITER)
    return output


def _convert_bml_line(line: str) -> str:
    heading = barelyml_heading(line)
    if heading:
        level, text = heading
        return "=" * level + " " + _bml_inline(text)

    item = parse_barelyml_list(line)
    if item:
        marker = ("." if item.ordered else "*") * item.level
        return f"{marker} {_bml_inline(item.text)}"

    for bml_label, label in ADMONITIONS_FROM_BML.items():
        if line.startswith(bml_label + ": "):
            return label + ": " + _bml_inline(line[len(bml_label) + 2:])
    return _bml_inline(line)


def barelyml_to_asciidoc(bml: str) -> str:
    """Convert BarelyML text to AsciiDoc.

    Tables become ``|===`` blocks (with ``[%header]`` when the first row
    is all header cells); hex colours are dropped.
    """
    lines = split_lines(bml)
    output: list[str] = []
    i = 0
    while i < len(lines):
        if lines[i].startswith(("^", "|")):
            start = i
            while i < len(lines) and lines[i].startswith(("^", "|")):
                i += 1
            output.extend(_bml_table(lines[start:i]))
            continue
        output.append(_convert_bml_line(lines[i]))
        i += 1
    return join_lines(output)


class AsciiDocConverter(DialectConverter):
    """Converter for AsciiDoc markup."""

    @property
    def name(self) -> str:
        return "asciidoc"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".adoc", ".asciidoc")

    def to_barelyml(self, text: str) -> str:
        return asciidoc_to_barelyml(text)

    def from_barelyml(self, text: str) -> str:
        return barelyml_to_asciidoc(text)
