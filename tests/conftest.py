"""Pytest fixtures for BarelyML tests."""

import pytest
from pathlib import Path
from PIL import Image

from barelyml.formatting.inline import InlineTokenizer
from barelyml.formatting.ir import Drawable
from barelyml.formatting.options import ParseOptions
from barelyml.formatting.parser import BarelyMLParser
from barelyml.resources import MappingResourceSource


@pytest.fixture
def options() -> ParseOptions:
    """Default parse options (no resource source)."""
    return ParseOptions()


@pytest.fixture
def parser(options: ParseOptions) -> BarelyMLParser:
    """Create a parser instance."""
    return BarelyMLParser(options)


@pytest.fixture
def tokenizer() -> InlineTokenizer:
    """Tokenizer using the default palette."""
    return InlineTokenizer()


@pytest.fixture
def sample_markup() -> str:
    """A document touching every block type."""
    return (
        "# Welcome\n"
        "Some *bold* and _italic_ text.\n"
        "\n"
        "INFO: Read the [[https://example.org|manual]] first\n"
        "- first\n"
        " 1. nested\n"
        "^ Name ^ Value ^\n"
        "| a | 1 |\n"
        "{{logo.png?100}}\n"
    )


@pytest.fixture
def logo() -> Drawable:
    """An in-memory 200x100 drawable."""
    return Drawable(filename="logo.png", width=200, height=100)


@pytest.fixture
def mapping_source(logo: Drawable) -> MappingResourceSource:
    """Resource source that knows about logo.png."""
    return MappingResourceSource({"logo.png": logo})


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Directory holding a 40x20 PNG and a file that is not an image."""
    Image.new("RGB", (40, 20), color=(255, 0, 0)).save(tmp_path / "red.png")
    (tmp_path / "broken.png").write_text("not an image", encoding="utf-8")
    return tmp_path
