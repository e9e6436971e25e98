"""Resource lookup for images referenced by documents."""

from collections.abc import Mapping
from pathlib import Path
from typing import Optional, Protocol

from PIL import Image

from barelyml.formatting.ir import Drawable


class ResourceSource(Protocol):
    """Resolves a filename to a drawable, or None when it is absent."""

    def resolve(self, filename: str) -> Optional[Drawable]:
        ...


class DirectoryResourceSource:
    """Load images from a directory using Pillow.

    Each lookup decodes the file afresh and hands out its own copy, so the
    receiving block owns what it gets.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def resolve(self, filename: str) -> Optional[Drawable]:
        """Open ``filename`` relative to the root directory.

        Returns:
            Drawable with the image's natural size, or None if the file is
            missing, outside the root or not a decodable image
        """
        if not filename:
            return None
        path = (self.root / filename).resolve()
        if not path.is_relative_to(self.root.resolve()) or not path.is_file():
            return None
        try:
            with Image.open(path) as img:
                img.load()
                return Drawable(
                    filename=filename,
                    width=img.width,
                    height=img.height,
                    image=img.copy(),
                )
        except (OSError, ValueError, Image.DecompressionBombError):
            return None


class MappingResourceSource:
    """In-memory lookup for hosts that pre-load their resources."""

    def __init__(self, drawables: Optional[Mapping[str, Drawable]] = None) -> None:
        self.drawables = dict(drawables or {})

    def add(self, drawable: Drawable) -> None:
        self.drawables[drawable.filename] = drawable

    def resolve(self, filename: str) -> Optional[Drawable]:
        return self.drawables.get(filename)
