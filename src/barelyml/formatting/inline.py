"""Inline tokenizer turning BarelyML lines into styled runs."""

import re
from collections.abc import Sequence
from typing import Optional, Union

from barelyml.formatting.ir import Color, FontSpec, InlineRun, TextStyle
from barelyml.formatting.palette import ColorPalette


# Heading level -> font height multiplier (outermost to innermost)
HEADING_SCALES = {
    1: 2.1,
    2: 1.7,
    3: 1.42,
    4: 1.25,
    5: 1.1,
}

HEADING_PATTERN = re.compile(r"^(#{1,5}) ")

LINE_BREAK_ESCAPE = "\\\\"


def heading_level(line: str) -> int:
    """Return the heading level (1-5) of a line, or 0 if it is not a heading."""
    match = HEADING_PATTERN.match(line)
    return len(match.group(1)) if match else 0


class RunBuilder:
    """Accumulates runs, merging neighbours that share a format."""

    def __init__(self) -> None:
        self.runs: list[InlineRun] = []

    def append(
        self,
        text: str,
        style: TextStyle,
        color: Color,
        scale: float,
    ) -> None:
        if not text:
            return
        run = InlineRun(text=text, style=style, color=color, scale=scale)
        if self.runs:
            last = self.runs[-1]
            if not last.line_break and last.same_format(run):
                self.runs[-1] = InlineRun(
                    text=last.text + text,
                    style=style,
                    color=color,
                    scale=scale,
                )
                return
        self.runs.append(run)

    def extend(self, runs: Sequence[InlineRun]) -> None:
        for run in runs:
            if run.line_break:
                self.runs.append(run)
            else:
                self.append(run.text, run.style, run.color, run.scale)

    def line_break(self, style: TextStyle, color: Color, scale: float) -> None:
        self.runs.append(
            InlineRun(text="\n", style=style, color=color, scale=scale, line_break=True)
        )

    def build(self) -> tuple[InlineRun, ...]:
        return tuple(self.runs)


class InlineTokenizer:
    """Tokenize BarelyML inline markup into InlineRuns.

    Handles:
    - ``# `` to ``##### `` heading prefixes
    - ``*`` bold and ``_`` italic toggles
    - ``<c#RGB>``, ``<c#RRGGBB>``, ``<c:name>`` and ``</c>`` colour tags
    - ``\\\\`` literal line breaks

    Unrecognized tags are kept as literal text.
    """

    def __init__(self, palette: Optional[ColorPalette] = None) -> None:
        self.palette = palette or ColorPalette()

    @property
    def default_color(self) -> Color:
        return self.palette.default_color

    def tokenize(
        self,
        lines: Union[str, Sequence[str]],
        font: Optional[FontSpec] = None,
        suppress_line_break: bool = False,
    ) -> tuple[InlineRun, ...]:
        """Convert one or more lines into a sequence of runs.

        Args:
            lines: A single line or a sequence of lines
            font: Base font; only its bold/italic flags affect the runs
            suppress_line_break: Skip the explicit break after each line

        Returns:
            Tuple of runs; each line ends with a line-break run unless suppressed
        """
        if isinstance(lines, str):
            lines = [lines]
        builder = RunBuilder()
        self._tokenize_into(builder, lines, font or FontSpec(), 1.0, suppress_line_break)
        return builder.build()

    def _tokenize_into(
        self,
        builder: RunBuilder,
        lines: Sequence[str],
        font: FontSpec,
        scale: float,
        suppress_line_break: bool,
        allow_heading: bool = True,
    ) -> None:
        default_color = self.default_color
        color = default_color
        bold = False
        italic = False

        for line in lines:
            line = line.replace(LINE_BREAK_ESCAPE, "\n")
            level = heading_level(line) if allow_heading else 0
            if level:
                heading_scale = scale * HEADING_SCALES[level]
                self._tokenize_into(
                    builder,
                    [line[level + 1:]],
                    font.boldened(),
                    heading_scale,
                    suppress_line_break=True,
                    allow_heading=False,
                )
                builder.line_break(self._style(font, False, False), default_color, heading_scale)
                continue

            while line:
                style = self._style(font, bold, italic)
                next_color = color
                bold_idx = line.find("*")
                italic_idx = line.find("_")
                tag_idx = line.find("<")

                if (
                    bold_idx > -1
                    and (bold_idx < italic_idx or italic_idx == -1)
                    and (bold_idx < tag_idx or tag_idx == -1)
                ):
                    builder.append(line[:bold_idx], style, color, scale)
                    line = line[bold_idx + 1:]
                    bold = not bold
                elif italic_idx > -1 and (italic_idx < tag_idx or tag_idx == -1):
                    builder.append(line[:italic_idx], style, color, scale)
                    line = line[italic_idx + 1:]
                    italic = not italic
                elif tag_idx > -1:
                    tag_end = line.find(">", tag_idx)
                    tag = line[tag_idx + 1:tag_end] if tag_end > tag_idx else ""
                    recognized, next_color = self._resolve_tag(tag, color)
                    if recognized:
                        builder.append(line[:tag_idx], style, color, scale)
                        line = line[tag_end + 1:]
                    else:
                        # keep the "<" and rescan whatever follows it
                        builder.append(line[:tag_idx + 1], style, color, scale)
                        line = line[tag_idx + 1:]
                else:
                    builder.append(line, style, color, scale)
                    line = ""
                color = next_color

            if not suppress_line_break:
                builder.line_break(self._style(font, bold, italic), default_color, scale)

    def _resolve_tag(self, tag: str, current: Color) -> tuple[bool, Color]:
        """Interpret a tag body; returns (recognized, colour after the tag)."""
        if tag.startswith("c#"):
            return True, Color.from_hex(tag[1:], self.default_color)
        if tag.startswith("c:"):
            resolved = self.palette.resolve(tag[2:])
            return True, resolved if resolved is not None else current
        if tag.startswith("/c"):
            return True, self.default_color
        return False, current

    @staticmethod
    def _style(font: FontSpec, bold: bool, italic: bool) -> TextStyle:
        style = TextStyle.NONE
        if font.bold or bold:
            style |= TextStyle.BOLD
        if font.italic or italic:
            style |= TextStyle.ITALIC
        return style
