"""Admonition paragraphs (INFO/HINT/IMPORTANT/CAUTION/WARNING)."""

from typing import Optional

from barelyml.formatting.ir import AdmonitionBlock, AdmonitionKind, BlockHeader, Link
from barelyml.formatting.options import ParseOptions


ADMONITION_PREFIXES: dict[str, AdmonitionKind] = {
    kind.prefix: kind for kind in AdmonitionKind
}


def admonition_kind(line: str) -> Optional[AdmonitionKind]:
    """Return the admonition category a line starts with, if any."""
    for prefix, kind in ADMONITION_PREFIXES.items():
        if line.startswith(prefix):
            return kind
    return None


def is_admonition_line(line: str) -> bool:
    return admonition_kind(line) is not None


def parse_admonition(
    line: str,
    options: ParseOptions,
    link: Optional[Link] = None,
) -> AdmonitionBlock:
    """Parse an admonition line.

    The body is everything after the first ": " and is tokenized like any
    other text. The accent colour comes from the palette entry for the
    category (blue, green, red, yellow, orange).
    """
    kind = admonition_kind(line) or AdmonitionKind.INFO
    body = line.split(": ", 1)[1] if ": " in line else line
    return AdmonitionBlock(
        kind=kind,
        runs=options.tokenizer.tokenize(body, options.font),
        accent=options.palette.resolve_or_default(kind.accent_name),
        header=BlockHeader(link=link),
    )
