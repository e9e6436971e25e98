"""Whole-line image blocks and image resolution shared with tables."""

from typing import Optional

from barelyml.formatting.ir import (
    BlockHeader,
    Color,
    Drawable,
    ImageBlock,
    ImageReference,
    InlineRun,
    Link,
)
from barelyml.formatting.links import parse_image_reference
from barelyml.formatting.options import ParseOptions


# Height reserved for a missing image
PLACEHOLDER_HEIGHT = 20.0


def resolve_image(
    reference: ImageReference,
    options: ParseOptions,
) -> tuple[Optional[Drawable], tuple[InlineRun, ...]]:
    """Look up an image through the configured resource source.

    Returns:
        Tuple of (drawable or None, placeholder message runs). The message
        is empty when the image was found.
    """
    color = options.palette.default_color
    message: list[str] = []
    drawable = None
    if options.resources is None:
        message.append("no file source. ")
    else:
        drawable = options.resources.resolve(reference.filename)
    if drawable is None or not drawable.is_valid:
        message.append(f"{reference.filename} not found.")
        drawable = None
    return drawable, _message_runs(message, color)


def _message_runs(parts: list[str], color: Color) -> tuple[InlineRun, ...]:
    if not parts:
        return ()
    return (InlineRun(text="".join(parts), color=color),)


def image_size(
    drawable: Drawable,
    max_width: Optional[int],
    available_width: Optional[float] = None,
) -> tuple[float, float]:
    """Displayed (width, height) keeping the drawable's aspect ratio."""
    width = float(drawable.width if available_width is None else available_width)
    if max_width:
        width = min(float(max_width), width)
    return width, width * drawable.height / drawable.width


def parse_image_block(
    line: str,
    options: ParseOptions,
    link: Optional[Link] = None,
) -> ImageBlock:
    """Parse ``{{file}}`` / ``{{file?width}}`` into an ImageBlock."""
    reference = parse_image_reference(line) or ImageReference(filename="")
    drawable, message = resolve_image(reference, options)
    return ImageBlock(
        reference=reference,
        drawable=drawable,
        missing_message=message,
        header=BlockHeader(link=link),
    )
