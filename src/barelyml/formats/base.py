"""Abstract base class and shared helpers for dialect converters."""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional


# Lists nest at most this deep in every dialect
MAX_LIST_LEVEL = 5

NO_COUNTERS: tuple[int, ...] = (0,) * MAX_LIST_LEVEL

LINE_ENDINGS = re.compile(r"\r\n|\r|\n")

# Link and image markup whose contents must survive inline rewriting
MARKUP_SPANS = re.compile(r"\[\[.*?\]\]|\{\{.*?\}\}")
# As above, plus any <...> tag
MARKUP_AND_TAG_SPANS = re.compile(r"\[\[.*?\]\]|\{\{.*?\}\}|<[^<>]*>")

BARELYML_ORDERED = re.compile(r"^(\s*)(\d+)\. (.*)$")
BARELYML_UNORDERED = re.compile(r"^(\s*)- (.*)$")
BARELYML_HEADING = re.compile(r"^(#{1,5}) (.*)$")

URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


class DialectConverter(ABC):
    """Abstract base class for converters between BarelyML and a dialect.

    Each converter is a pair of pure, line-oriented rewrites. Conversion
    is best effort: constructs the target cannot express are dropped or
    flattened rather than reported.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Dialect name used on the command line (e.g. 'markdown')."""
        ...

    @property
    @abstractmethod
    def extensions(self) -> tuple[str, ...]:
        """File extensions conventionally used for the dialect."""
        ...

    @abstractmethod
    def to_barelyml(self, text: str) -> str:
        """Convert dialect text to BarelyML."""
        ...

    @abstractmethod
    def from_barelyml(self, text: str) -> str:
        """Convert BarelyML text to the dialect."""
        ...


@dataclass(frozen=True)
class BarelyMLListLine:
    """A BarelyML list line broken into its parts."""

    level: int
    ordered: bool
    text: str
    number: Optional[int] = None


def split_lines(text: str) -> list[str]:
    """Split on any line ending, keeping a trailing empty line."""
    return LINE_ENDINGS.split(text)


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def rewrite_outside(
    line: str,
    rewrite: Callable[[str], str],
    protected: re.Pattern = MARKUP_SPANS,
) -> str:
    """Apply ``rewrite`` to every part of ``line`` not matched by ``protected``."""
    parts: list[str] = []
    pos = 0
    for match in protected.finditer(line):
        parts.append(rewrite(line[pos:match.start()]))
        parts.append(match.group(0))
        pos = match.end()
    parts.append(rewrite(line[pos:]))
    return "".join(parts)


def has_scheme(target: str) -> bool:
    """True for targets such as 'https://...' or 'mailto:...'."""
    return URI_SCHEME.match(target) is not None


def list_level(indent: int) -> int:
    """BarelyML nesting level (1-5) for a count of leading whitespace."""
    return min(indent, MAX_LIST_LEVEL - 1) + 1


def parse_barelyml_list(line: str) -> Optional[BarelyMLListLine]:
    """Recognise ``<ws>N. text`` and ``<ws>- text`` list lines."""
    match = BARELYML_ORDERED.match(line)
    if match:
        return BarelyMLListLine(
            level=list_level(len(match.group(1))),
            ordered=True,
            text=match.group(3),
            number=int(match.group(2)),
        )
    match = BARELYML_UNORDERED.match(line)
    if match:
        return BarelyMLListLine(
            level=list_level(len(match.group(1))),
            ordered=False,
            text=match.group(2),
        )
    return None


def barelyml_list_line(level: int, text: str, number: Optional[int] = None) -> str:
    """Format a BarelyML list line; ``number`` None means unordered."""
    indent = " " * (max(1, min(level, MAX_LIST_LEVEL)) - 1)
    marker = f"{number}." if number is not None else "-"
    return f"{indent}{marker} {text}"


def advance_counters(
    counters: tuple[int, ...],
    level: int,
) -> tuple[tuple[int, ...], int]:
    """Count an ordered item at ``level`` (1-5).

    The counter for ``level`` is incremented and every deeper counter is
    reset; shallower counters are left alone.

    Returns:
        Tuple of (new counters, number for this item)
    """
    index = level - 1
    number = counters[index] + 1
    updated = counters[:index] + (number,) + (0,) * (MAX_LIST_LEVEL - level)
    return updated, number


def reset_counters_from(counters: tuple[int, ...], level: int) -> tuple[int, ...]:
    """Reset the counters at ``level`` and deeper (an unordered item)."""
    index = level - 1
    return counters[:index] + (0,) * (MAX_LIST_LEVEL - index)


def barelyml_heading(line: str) -> Optional[tuple[int, str]]:
    """Return (level, text) for a BarelyML heading line."""
    match = BARELYML_HEADING.match(line)
    if match:
        return len(match.group(1)), match.group(2)
    return None
