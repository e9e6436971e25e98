"""Block segmenter turning BarelyML text into a Document."""

import re
from typing import Optional

from barelyml.blocks.admonitions import is_admonition_line, parse_admonition
from barelyml.blocks.images import parse_image_block
from barelyml.blocks.lists import is_list_item, parse_list_item
from barelyml.blocks.tables import is_table_line, parse_table
from barelyml.blocks.text import parse_text_block
from barelyml.formatting.ir import Block, Document, Link
from barelyml.formatting.links import consume_link, contains_link, is_image_line
from barelyml.formatting.options import ParseOptions


LINE_ENDINGS = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text on any line ending; a trailing line ending adds no line."""
    if not text:
        return []
    lines = LINE_ENDINGS.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def starts_block(line: str) -> bool:
    """True if the line opens a list item, admonition, image, table or link block."""
    return (
        is_list_item(line)
        or is_admonition_line(line)
        or is_image_line(line)
        or is_table_line(line)
        or contains_link(line)
    )


class BarelyMLParser:
    """Parse BarelyML markup into structured IR.

    A single forward scan classifies each line, checking in this order:
    list item, admonition, image, table, link. Anything else is gathered
    into a paragraph that runs until one of those starts, the document
    ends, or a blank line is directly followed by a non-blank one.
    """

    def __init__(self, options: Optional[ParseOptions] = None) -> None:
        self.options = options or ParseOptions()

    def parse(self, text: str) -> Document:
        """Convert BarelyML text to a Document.

        Args:
            text: The full document, with any line endings

        Returns:
            Document with blocks in source order
        """
        lines = split_lines(text)
        blocks: list[Block] = []

        li = 0
        while li < len(lines):
            line = lines[li]
            if is_list_item(line):
                line, link = self._take_link(line)
                blocks.append(parse_list_item(line, self.options, link))
                li += 1
            elif is_admonition_line(line):
                line, link = self._take_link(line)
                blocks.append(parse_admonition(line, self.options, link))
                li += 1
            elif is_image_line(line):
                line, link = self._take_link(line)
                blocks.append(parse_image_block(line, self.options, link))
                li += 1
            elif is_table_line(line):
                start = li
                while li < len(lines) and is_table_line(lines[li]):
                    li += 1
                blocks.append(parse_table(lines[start:li], self.options))
            elif contains_link(line):
                line, link = consume_link(line)
                blocks.append(parse_text_block([line], self.options, link))
                li += 1
            else:
                paragraph: list[str] = []
                while li < len(lines) and not (paragraph and starts_block(lines[li])):
                    current = lines[li]
                    paragraph.append(current)
                    li += 1
                    if not current.strip() and li < len(lines) and lines[li].strip():
                        break
                blocks.append(parse_text_block(paragraph, self.options))

        return Document(blocks=tuple(blocks))

    @staticmethod
    def _take_link(line: str) -> tuple[str, Optional[Link]]:
        if contains_link(line):
            return consume_link(line)
        return line, None


def parse_document(text: str, options: Optional[ParseOptions] = None) -> Document:
    """Parse BarelyML text with the given options."""
    return BarelyMLParser(options).parse(text)
