"""Conversion between a Markdown subset and BarelyML."""

import re

from barelyml.blocks.tables import split_row
from barelyml.formats.base import (
    MARKUP_AND_TAG_SPANS,
    DialectConverter,
    has_scheme,
    join_lines,
    rewrite_outside,
    split_lines,
)


# Markdown -> BarelyML
UNORDERED_MARKER = re.compile(r"^(\s*)[*+] ")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]*)\)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")
AUTOLINK_PATTERN = re.compile(r"<([A-Za-z][A-Za-z0-9+.\-]{1,31}:[^<>\s]*)>")
SEPARATOR_CHARS = frozenset("| -\t:")

# Placeholder used while swapping bold and italic markers
TMP_BOLD_MARKER = "%%%BarelyML%%%Bold%%%"

# BarelyML -> Markdown
BML_LINK_PATTERN = re.compile(r"\[\[(.*?)\]\]")
BML_IMAGE_PATTERN = re.compile(r"\{\{([^}?]*)(?:\?[^}]*)?\}\}")
BML_COLOR_TAG = re.compile(r"<c[#:][^>]*>|</c>")


def _is_table_separator(line: str) -> bool:
    """True for lines like ``| --- | :-: |`` made only of separator characters."""
    return bool(line) and "-" in line and all(ch in SEPARATOR_CHARS for ch in line)


def _address(raw: str) -> str:
    """Strip an optional title from a Markdown link destination."""
    parts = raw.strip().split()
    return parts[0] if parts else ""


def _swap_emphasis(text: str) -> str:
    text = text.replace("**", TMP_BOLD_MARKER)
    text = text.replace("__", TMP_BOLD_MARKER)
    text = text.replace("*", "_")
    return text.replace(TMP_BOLD_MARKER, "*")


def _convert_md_line(line: str) -> str:
    match = UNORDERED_MARKER.match(line)
    if match:
        line = match.group(1) + "- " + line[match.end():]
    line = IMAGE_PATTERN.sub(lambda m: "{{" + _address(m.group(2)) + "}}", line)
    line = LINK_PATTERN.sub(
        lambda m: "[[" + _address(m.group(2)) + "|" + m.group(1) + "]]", line
    )
    line = AUTOLINK_PATTERN.sub(lambda m: "[[" + m.group(1) + "]]", line)
    return line


def markdown_to_barelyml(md: str) -> str:
    """Convert Markdown text to BarelyML.

    Handles:
    - ``*``/``+`` bullets -> ``-``
    - ``![alt](url)`` -> ``{{url}}``
    - ``[text](url)`` -> ``[[url|text]]`` and ``<scheme:...>`` -> ``[[...]]``
    - a table row followed by a separator row becomes a ``^`` header row
    - ``**``/``__`` -> ``*`` and ``*`` -> ``_``
    """
    lines = split_lines(md)
    output: list[str] = []
    i = 0
    while i < len(lines):
        line = _convert_md_line(lines[i])
        if line.strip().startswith("|"):
            line = line.strip()
            if i + 1 < len(lines) and _is_table_separator(lines[i + 1].strip()):
                line = rewrite_outside(line, lambda s: s.replace("|", "^"))
                i += 1
        output.append(rewrite_outside(line, _swap_emphasis))
        i += 1
    return join_lines(output)


def _md_link(match: re.Match) -> str:
    inner = match.group(1)
    if "|" in inner:
        target, label = inner.split("|", 1)
        label = BML_IMAGE_PATTERN.sub(lambda m: f"![]({m.group(1)})", label)
        return f"[{label}]({target})"
    if has_scheme(inner):
        return f"<{inner}>"
    return f"[{inner}]({inner})"


def _table_separator(line: str) -> str:
    widths = [max(3, len(raw.strip())) for raw, _ in split_row(line)]
    return "|" + "|".join(" " + "-" * w + " " for w in widths) + "|"


def barelyml_to_markdown(bml: str) -> str:
    """Convert BarelyML text to Markdown.

    A table whose first row is a ``^`` header row gets a synthesized
    separator row. Colour tags are dropped, italics are left as ``_`` and
    every ``*`` becomes ``**``.
    """
    output: list[str] = []
    in_table = False
    for line in split_lines(bml):
        is_table = line.startswith("^") or line.startswith("|")
        line = BML_COLOR_TAG.sub("", line)
        separator = None
        if is_table and not in_table and line.startswith("^"):
            separator = _table_separator(line)
        in_table = is_table

        line = rewrite_outside(
            line, lambda s: s.replace("*", "**"), MARKUP_AND_TAG_SPANS
        )
        if is_table:
            line = rewrite_outside(line, lambda s: s.replace("^", "|"))
        line = BML_LINK_PATTERN.sub(_md_link, line)
        line = BML_IMAGE_PATTERN.sub(lambda m: f"![]({m.group(1)})", line)

        output.append(line)
        if separator is not None:
            output.append(separator)
    return join_lines(output)


class MarkdownConverter(DialectConverter):
    """Converter for the Markdown subset."""

    @property
    def name(self) -> str:
        return "markdown"

    @property
    def extensions(self) -> tuple[str, ...]:
        return (".md", ".markdown")

    def to_barelyml(self, text: str) -> str:
        return markdown_to_barelyml(text)

    def from_barelyml(self, text: str) -> str:
        return barelyml_to_markdown(text)
