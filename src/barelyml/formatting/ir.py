"""Intermediate Representation for parsed BarelyML documents.

This module defines the data structures produced by the block segmenter
and consumed by whatever renders a document. Everything here is created
fresh during one parse pass; blocks are immutable once built.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, Flag, auto
from typing import Any, ClassVar, Optional, Union


# =============================================================================
# Styling primitives
# =============================================================================

class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Color:
    """An ARGB colour stored as eight upper-case hex digits.

    Attributes:
        argb: Hex string in AARRGGBB order (e.g. "FF000000" for black)
    """

    argb: str = "FF000000"

    @classmethod
    def from_hex(cls, value: str, default: Optional["Color"] = None) -> "Color":
        """Parse a colour string such as "#A00", "#FFAA00" or "#80FFAA00".

        Three and four digit forms are expanded by doubling every digit.
        Six digit values get a fully opaque "FF" alpha prefix. Anything
        that is empty or not hexadecimal resolves to ``default``.
        """
        default = default or BLACK
        s = value
        if s.startswith("#"):
            s = s[1:]
            if len(s) in (3, 4):
                s = "".join(ch * 2 for ch in s)
            if len(s) == 6:
                s = "FF" + s
        if not s or any(ch not in HEX_DIGITS for ch in s):
            return default
        return cls(argb=f"{int(s[:8], 16):08X}")

    @property
    def alpha(self) -> int:
        return int(self.argb[0:2], 16)

    @property
    def red(self) -> int:
        return int(self.argb[2:4], 16)

    @property
    def green(self) -> int:
        return int(self.argb[4:6], 16)

    @property
    def blue(self) -> int:
        return int(self.argb[6:8], 16)

    @property
    def rgb_hex(self) -> str:
        """Colour as "#RRGGBB", dropping alpha."""
        return f"#{self.argb[2:]}"

    def __str__(self) -> str:
        return self.argb


BLACK = Color("FF000000")


@dataclass(frozen=True)
class FontSpec:
    """Base font descriptor used while tokenizing.

    Attributes:
        name: Typeface name (empty for the host default)
        height: Font height in pixels
        bold: Whether the font is bold
        italic: Whether the font is italic
    """

    name: str = ""
    height: float = 15.0
    bold: bool = False
    italic: bool = False

    def boldened(self) -> "FontSpec":
        return replace(self, bold=True)

    def with_height(self, height: float) -> "FontSpec":
        return replace(self, height=height)


# =============================================================================
# Inline content
# =============================================================================

@dataclass(frozen=True)
class InlineRun:
    """A maximal span of text with uniform styling.

    Attributes:
        text: The text content
        style: Combined style flags (BOLD, ITALIC, or both)
        color: Text colour
        scale: Font size relative to the base font height
        line_break: Whether this run is the explicit end-of-line break
    """

    text: str
    style: TextStyle = TextStyle.NONE
    color: Color = BLACK
    scale: float = 1.0
    line_break: bool = False

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    def same_format(self, other: "InlineRun") -> bool:
        return (
            self.style == other.style
            and self.color == other.color
            and self.scale == other.scale
        )

    def __str__(self) -> str:
        return self.text


def plain_text(runs: tuple[InlineRun, ...]) -> str:
    """Concatenate the visible text of a run sequence."""
    return "".join(run.text for run in runs)


@dataclass(frozen=True)
class Link:
    """A link target attached to a block or table cell."""

    target: str
    display_text: Optional[str] = None

    @property
    def label(self) -> str:
        return self.display_text if self.display_text is not None else self.target


@dataclass(frozen=True)
class ImageReference:
    """Reference parsed from ``{{filename}}`` or ``{{filename?width}}``."""

    filename: str
    max_width: Optional[int] = None


@dataclass(frozen=True)
class Drawable:
    """A decoded resource handed out by a resource source.

    The block that receives it owns it for the block's lifetime.

    Attributes:
        filename: Name the resource was looked up under
        width: Natural width in pixels
        height: Natural height in pixels
        image: Backend-specific decoded image (e.g. a PIL image), if any
    """

    filename: str
    width: int
    height: int
    image: Any = field(default=None, compare=False, repr=False)

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class BlockHeader:
    """Fields shared by every block variant."""

    link: Optional[Link] = None


@dataclass(frozen=True)
class TextBlock:
    """A paragraph (possibly including headings) made of styled runs."""

    runs: tuple[InlineRun, ...] = ()
    header: BlockHeader = field(default_factory=BlockHeader)

    can_extend_beyond_margin: ClassVar[bool] = False

    @property
    def link(self) -> Optional[Link]:
        return self.header.link

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


class AdmonitionKind(Enum):
    """Semantic admonition categories and their accent palette names."""

    INFO = "info"
    HINT = "hint"
    IMPORTANT = "important"
    CAUTION = "caution"
    WARNING = "warning"

    @property
    def prefix(self) -> str:
        """Line prefix that introduces this admonition."""
        return f"{self.name}: "

    @property
    def accent_name(self) -> str:
        return ADMONITION_ACCENTS[self]


ADMONITION_ACCENTS = {
    AdmonitionKind.INFO: "blue",
    AdmonitionKind.HINT: "green",
    AdmonitionKind.IMPORTANT: "red",
    AdmonitionKind.CAUTION: "yellow",
    AdmonitionKind.WARNING: "orange",
}


@dataclass(frozen=True)
class AdmonitionBlock:
    """A callout paragraph with a fixed category and accent colour."""

    kind: AdmonitionKind
    runs: tuple[InlineRun, ...] = ()
    accent: Color = BLACK
    header: BlockHeader = field(default_factory=BlockHeader)

    can_extend_beyond_margin: ClassVar[bool] = False

    @property
    def link(self) -> Optional[Link]:
        return self.header.link

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass(frozen=True)
class ImageBlock:
    """A whole-line image, optionally acting as a link.

    Attributes:
        reference: Parsed filename and optional maximum width
        drawable: Resolved resource, or None when it could not be found
        missing_message: Placeholder text shown instead of a missing image
    """

    reference: ImageReference
    drawable: Optional[Drawable] = None
    missing_message: tuple[InlineRun, ...] = ()
    header: BlockHeader = field(default_factory=BlockHeader)

    can_extend_beyond_margin: ClassVar[bool] = False

    @property
    def link(self) -> Optional[Link]:
        return self.header.link

    @property
    def filename(self) -> str:
        return self.reference.filename

    @property
    def max_width(self) -> Optional[int]:
        return self.reference.max_width

    @property
    def is_missing(self) -> bool:
        return self.drawable is None or not self.drawable.is_valid


@dataclass(frozen=True)
class ListItem:
    """One ordered or unordered list item.

    Attributes:
        runs: Item body
        label: Label runs ("3." or a bullet glyph); empty for the fallback case
        indent: Left indent in pixels
        label_gap: Horizontal space reserved for the label in pixels
        ordered: Whether the label is numeric
    """

    runs: tuple[InlineRun, ...] = ()
    label: tuple[InlineRun, ...] = ()
    indent: int = 0
    label_gap: int = 0
    ordered: bool = False
    header: BlockHeader = field(default_factory=BlockHeader)

    can_extend_beyond_margin: ClassVar[bool] = False

    @property
    def link(self) -> Optional[Link]:
        return self.header.link

    @property
    def label_text(self) -> str:
        return plain_text(self.label)

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass(frozen=True)
class Cell:
    """A single table cell.

    Attributes:
        runs: Tokenized cell text (empty when the cell holds an image)
        link: Link extracted from the cell, if any
        image: Image reference when the cell is purely an image
        drawable: Resolved image resource
        is_header: Whether the cell was introduced by "^"
        natural_width: Unwrapped layout width in pixels
        natural_height: Unwrapped layout height in pixels
    """

    runs: tuple[InlineRun, ...] = ()
    link: Optional[Link] = None
    image: Optional[ImageReference] = None
    drawable: Optional[Drawable] = None
    is_header: bool = False
    natural_width: float = 0.0
    natural_height: float = 0.0

    @property
    def plain_text(self) -> str:
        return plain_text(self.runs)


@dataclass(frozen=True)
class TableBlock:
    """A table built from contiguous ``^``/``|`` lines.

    Rows may be ragged; missing trailing cells are simply absent.
    """

    rows: tuple[tuple[Cell, ...], ...] = ()
    column_widths: tuple[float, ...] = ()
    row_heights: tuple[float, ...] = ()
    header: BlockHeader = field(default_factory=BlockHeader)

    can_extend_beyond_margin: ClassVar[bool] = True

    @property
    def link(self) -> Optional[Link]:
        return self.header.link

    @property
    def column_count(self) -> int:
        return len(self.column_widths)


Block = Union[TextBlock, AdmonitionBlock, ImageBlock, TableBlock, ListItem]


@dataclass(frozen=True)
class Document:
    """An ordered, immutable sequence of blocks."""

    blocks: tuple[Block, ...] = ()

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]

    @property
    def links(self) -> list[Link]:
        """All links attached to blocks or table cells, in document order."""
        found: list[Link] = []
        for block in self.blocks:
            if block.link is not None:
                found.append(block.link)
            if isinstance(block, TableBlock):
                for row in block.rows:
                    found.extend(cell.link for cell in row if cell.link is not None)
        return found

    @property
    def plain_text(self) -> str:
        """Visible text of all text-bearing blocks."""
        parts: list[str] = []
        for block in self.blocks:
            if isinstance(block, (TextBlock, AdmonitionBlock, ListItem)):
                parts.append(block.plain_text)
            elif isinstance(block, TableBlock):
                for row in block.rows:
                    parts.append(" ".join(cell.plain_text for cell in row))
        return "".join(part if part.endswith("\n") else part + "\n" for part in parts)
