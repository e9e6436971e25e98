"""Converters between BarelyML and other lightweight markup dialects."""

from pathlib import Path

from barelyml.formats.base import DialectConverter
from barelyml.formats.markdown import (
    MarkdownConverter,
    barelyml_to_markdown,
    markdown_to_barelyml,
)
from barelyml.formats.dokuwiki import (
    DokuWikiConverter,
    barelyml_to_dokuwiki,
    dokuwiki_to_barelyml,
)
from barelyml.formats.asciidoc import (
    AsciiDocConverter,
    asciidoc_to_barelyml,
    barelyml_to_asciidoc,
)

__all__ = [
    "DialectConverter",
    "MarkdownConverter",
    "DokuWikiConverter",
    "AsciiDocConverter",
    "markdown_to_barelyml",
    "barelyml_to_markdown",
    "dokuwiki_to_barelyml",
    "barelyml_to_dokuwiki",
    "asciidoc_to_barelyml",
    "barelyml_to_asciidoc",
    "get_converter",
    "convert",
    "detect_dialect",
]

BARELYML = "barelyml"
BARELYML_EXTENSIONS = (".bml", ".barelyml")

# Map dialect names to converters
CONVERTER_MAP: dict[str, type[DialectConverter]] = {
    "markdown": MarkdownConverter,
    "dokuwiki": DokuWikiConverter,
    "asciidoc": AsciiDocConverter,
}

SUPPORTED_DIALECTS = (BARELYML,) + tuple(CONVERTER_MAP.keys())


def get_converter(dialect: str) -> DialectConverter:
    """Get a converter instance for a dialect name."""
    name = dialect.lower()
    if name not in CONVERTER_MAP:
        raise ValueError(
            f"Unsupported dialect: {dialect}. "
            f"Supported dialects: {', '.join(CONVERTER_MAP)}"
        )
    return CONVERTER_MAP[name]()


def detect_dialect(path: Path) -> str:
    """Guess a dialect name from a file extension."""
    ext = path.suffix.lower()
    if ext in BARELYML_EXTENSIONS:
        return BARELYML
    for name, converter in CONVERTER_MAP.items():
        if ext in converter().extensions:
            return name
    raise ValueError(
        f"Cannot detect dialect for extension: {ext or '(none)'}. "
        f"Supported dialects: {', '.join(SUPPORTED_DIALECTS)}"
    )


def convert(text: str, source: str, target: str) -> str:
    """Convert text between any two supported dialects.

    Conversions between two foreign dialects go through BarelyML.
    """
    source = source.lower()
    target = target.lower()
    for name in (source, target):
        if name != BARELYML and name not in CONVERTER_MAP:
            raise ValueError(
                f"Unsupported dialect: {name}. "
                f"Supported dialects: {', '.join(SUPPORTED_DIALECTS)}"
            )
    if source == target:
        return text

    bml = text if source == BARELYML else get_converter(source).to_barelyml(text)
    if target == BARELYML:
        return bml
    return get_converter(target).from_barelyml(bml)
