"""Link and image markup extraction.

Links look like ``[[target]]`` or ``[[target|label]]``; images look like
``{{file}}`` or ``{{file?maxwidth}}``. A link may wrap an image, in which
case the image markup is kept and the link is attached to the image.
"""

from typing import Optional

from barelyml.formatting.ir import ImageReference, Link
from barelyml.formatting.palette import LINK_NAME


LINK_OPEN = "[["
LINK_CLOSE = "]]"
IMAGE_OPEN = "{{"
IMAGE_CLOSE = "}}"


def contains_link(line: str) -> bool:
    """True if the line has ``[[`` followed later by ``]]``."""
    start = line.find(LINK_OPEN)
    return start >= 0 and line.find(LINK_CLOSE, start + 2) >= 0


def contains_image(text: str) -> bool:
    """True if the text has a complete ``{{...}}`` marker."""
    start = text.find(IMAGE_OPEN)
    return start >= 0 and text.find(IMAGE_CLOSE, start + 2) >= 0


def consume_link(line: str) -> tuple[str, Optional[Link]]:
    """Rewrite the first link in a line into styled literal markup.

    Args:
        line: A BarelyML line

    Returns:
        Tuple of (rewritten line, Link or None). Lines without a complete
        link are returned unchanged.
    """
    start = line.find(LINK_OPEN)
    end = line.find(LINK_CLOSE, start + 2) if start >= 0 else -1
    if start < 0 or end < 0:
        return line, None

    inner = line[start + 2:end]
    if "|" in inner:
        target, display_text = inner.split("|", 1)
        link = Link(target=target, display_text=display_text)
    else:
        link = Link(target=inner)

    text = link.label
    if contains_image(text):
        replacement = text
    else:
        replacement = f"<c:{LINK_NAME}>*{text}*</c>"
    return line[:start] + replacement + line[end + 2:], link


def is_image_line(line: str) -> bool:
    """True if the trimmed line is a single image, or a link around one."""
    s = line.strip()
    if s.startswith(IMAGE_OPEN) and s.endswith(IMAGE_CLOSE):
        return s.find(IMAGE_CLOSE, 2) == len(s) - 2
    if s.startswith(LINK_OPEN) and s.endswith(LINK_CLOSE):
        return s.find(LINK_CLOSE, 2) == len(s) - 2 and contains_image(s[2:-2])
    return False


def parse_image_reference(text: str) -> Optional[ImageReference]:
    """Extract the first ``{{file?width}}`` marker from text."""
    start = text.find(IMAGE_OPEN)
    end = text.find(IMAGE_CLOSE, start + 2) if start >= 0 else -1
    if start < 0 or end < 0:
        return None

    filename = text[start + 2:end]
    max_width = None
    if "?" in filename:
        filename, width_text = filename.split("?", 1)
        max_width = _leading_int(width_text)
    return ImageReference(filename=filename, max_width=max_width)


def is_pure_image(text: str) -> bool:
    """True if the text is nothing but one ``{{...}}`` marker."""
    s = text.strip()
    return (
        s.startswith(IMAGE_OPEN)
        and s.endswith(IMAGE_CLOSE)
        and s.find(IMAGE_CLOSE, 2) == len(s) - 2
    )


def _leading_int(text: str) -> Optional[int]:
    """Parse leading digits; returns None for no digits or zero."""
    digits = ""
    for ch in text.strip():
        if ch not in "0123456789":
            break
        digits += ch
    value = int(digits) if digits else 0
    return value if value > 0 else None
