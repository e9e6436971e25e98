"""Stateful document holder for hosts that display BarelyML."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Optional, Union

from barelyml.core.layout import BlockPlacement, content_height, layout_document
from barelyml.formats import convert
from barelyml.formatting.ir import Block, Document, FontSpec, Link
from barelyml.formatting.options import ParseOptions
from barelyml.formatting.palette import ColorPalette
from barelyml.formatting.parser import parse_document
from barelyml.resources import ResourceSource

__all__ = ["BarelyMLDocument", "ParseOptions", "parse_document"]


class BarelyMLDocument:
    """Holds the markup, the options it was parsed with and the parsed blocks.

    Every setter re-parses and swaps in a complete new ``Document``; the
    previous block tuple is never modified.
    """

    def __init__(self, options: Optional[ParseOptions] = None) -> None:
        self.options = options or ParseOptions()
        self._markup = ""
        self._document = Document()

    @property
    def markup(self) -> str:
        return self._markup

    @property
    def document(self) -> Document:
        return self._document

    @property
    def blocks(self) -> tuple[Block, ...]:
        return self._document.blocks

    @property
    def links(self) -> list[Link]:
        return self._document.links

    def set_markup_string(self, text: str, font: Optional[FontSpec] = None) -> Document:
        """Parse BarelyML text, optionally switching the base font first."""
        if font is not None:
            self.options = replace(self.options, font=font)
        self._markup = text
        self._document = parse_document(text, self.options)
        return self._document

    def set_markdown_string(self, text: str, font: Optional[FontSpec] = None) -> Document:
        return self.set_markup_string(convert(text, "markdown", "barelyml"), font)

    def set_dokuwiki_string(self, text: str, font: Optional[FontSpec] = None) -> Document:
        return self.set_markup_string(convert(text, "dokuwiki", "barelyml"), font)

    def set_asciidoc_string(self, text: str, font: Optional[FontSpec] = None) -> Document:
        return self.set_markup_string(convert(text, "asciidoc", "barelyml"), font)

    def set_colours(self, palette: Union[ColorPalette, Mapping[str, str]]) -> None:
        """Replace the whole palette and re-parse the current markup."""
        if not isinstance(palette, ColorPalette):
            palette = ColorPalette(palette)
        self.options = replace(self.options, palette=palette)
        self.set_markup_string(self._markup)

    def set_resource_source(self, source: Optional[ResourceSource]) -> None:
        self.options = replace(self.options, resources=source)
        self.set_markup_string(self._markup)

    def layout(self, width: float) -> list[BlockPlacement]:
        return layout_document(self._document, width, self.options)

    def content_height(self, width: float) -> float:
        return content_height(self._document, width, self.options)
