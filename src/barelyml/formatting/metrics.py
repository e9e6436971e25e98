"""Text measurement used for table sizing and layout queries.

Real glyph metrics belong to whoever renders the document. The default
measurer here is a deterministic monospace approximation that is good
enough for sizing decisions and keeps parsing free of font machinery.
"""

import re
from dataclasses import dataclass
from typing import Protocol, Sequence

from barelyml.formatting.ir import FontSpec, InlineRun


# Width of one glyph and height of one line, relative to the font height
GLYPH_ADVANCE = 0.55
LINE_SPACING = 1.2

UNBOUNDED_WIDTH = 1.0e7

_WORD_PATTERN = re.compile(r"\S+|\s+")


@dataclass(frozen=True)
class Size:
    """Width and height in pixels."""

    width: float = 0.0
    height: float = 0.0


class TextMeasurer(Protocol):
    """Anything that can lay out runs within a maximum width."""

    def measure(
        self,
        runs: Sequence[InlineRun],
        font: FontSpec,
        max_width: float = UNBOUNDED_WIDTH,
    ) -> Size:
        ...


class ApproximateTextMeasurer:
    """Monospace approximation with greedy word wrapping."""

    def __init__(
        self,
        glyph_advance: float = GLYPH_ADVANCE,
        line_spacing: float = LINE_SPACING,
    ) -> None:
        self.glyph_advance = glyph_advance
        self.line_spacing = line_spacing

    def measure(
        self,
        runs: Sequence[InlineRun],
        font: FontSpec,
        max_width: float = UNBOUNDED_WIDTH,
    ) -> Size:
        """Measure the wrapped extent of a run sequence.

        Args:
            runs: Runs to lay out; line-break runs and embedded newlines
                start new lines
            font: Base font (run scales are relative to its height)
            max_width: Wrapping width in pixels

        Returns:
            Size of the laid out text
        """
        width = 0.0
        height = 0.0
        for line in self._split_lines(runs):
            line_width, line_count = self._wrap(line, font, max_width)
            scale = max((run.scale for run in line), default=1.0)
            width = max(width, line_width)
            height += line_count * self.line_spacing * font.height * scale
        return Size(width=width, height=height)

    def _split_lines(self, runs: Sequence[InlineRun]) -> list[list[InlineRun]]:
        lines: list[list[InlineRun]] = []
        current: list[InlineRun] = []
        for run in runs:
            if run.line_break:
                current.append(run)
                lines.append(current)
                current = []
                continue
            parts = run.text.split("\n")
            for i, part in enumerate(parts):
                if i > 0:
                    lines.append(current)
                    current = []
                current.append(
                    InlineRun(text=part, style=run.style, color=run.color, scale=run.scale)
                )
        if any(run.text for run in current):
            lines.append(current)
        return lines

    def _wrap(
        self,
        line: list[InlineRun],
        font: FontSpec,
        max_width: float,
    ) -> tuple[float, int]:
        """Return (widest visual line, number of visual lines)."""
        widest = 0.0
        x = 0.0
        count = 1
        for run in line:
            if run.line_break:
                continue
            advance = self.glyph_advance * font.height * run.scale
            for word in _WORD_PATTERN.findall(run.text):
                word_width = len(word) * advance
                if word.isspace():
                    x += word_width
                    continue
                if x > 0 and x + word_width > max_width:
                    count += 1
                    x = 0.0
                x += word_width
                widest = max(widest, x)
        return widest, count
