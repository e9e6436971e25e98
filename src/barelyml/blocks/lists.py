"""Ordered and unordered list items."""

from typing import Optional

from barelyml.formatting.ir import BlockHeader, InlineRun, Link, ListItem
from barelyml.formatting.options import ParseOptions


BULLET = "•"
DIGITS = frozenset("0123456789")


def _is_number(text: str) -> bool:
    return bool(text) and all(ch in DIGITS for ch in text)


def is_list_item(line: str) -> bool:
    """True for ``<ws>digits. text`` and ``<ws>- text`` lines."""
    dot = line.find(". ")
    if dot > 0 and _is_number(line[:dot].lstrip()):
        return True
    hyphen = line.find("- ")
    return hyphen >= 0 and not line[:hyphen].strip()


def parse_list_item(
    line: str,
    options: ParseOptions,
    link: Optional[Link] = None,
) -> ListItem:
    """Parse a list item line into label, indent and body runs.

    The indent is the number of whitespace characters before the marker
    times ``options.indent_per_space``. A line that does not actually
    match either form is kept as unlabelled text with no indent.
    """
    tokenizer = options.tokenizer
    default_color = options.palette.default_color
    header = BlockHeader(link=link)

    dot = line.find(". ")
    before_dot = line[:dot] if dot > 0 else ""
    number = before_dot.lstrip()
    if dot > 0 and _is_number(number):
        return ListItem(
            runs=tokenizer.tokenize(line[dot + 2:].lstrip(), options.font),
            label=(InlineRun(text=number + ".", color=default_color),),
            indent=options.indent_per_space * (len(before_dot) - len(number)),
            label_gap=options.label_gap,
            ordered=True,
            header=header,
        )

    hyphen = line.find("- ")
    before_hyphen = line[:hyphen] if hyphen >= 0 else line
    if hyphen >= 0 and not before_hyphen.strip():
        return ListItem(
            runs=tokenizer.tokenize(line[hyphen + 2:].lstrip(), options.font),
            label=(InlineRun(text=BULLET, color=default_color),),
            indent=options.indent_per_space * len(before_hyphen),
            label_gap=options.label_gap,
            ordered=False,
            header=header,
        )

    return ListItem(
        runs=tokenizer.tokenize(line, options.font),
        label_gap=options.label_gap,
        header=header,
    )
