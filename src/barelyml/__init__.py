"""BarelyML: a minimal markup language, its parser and dialect converters."""

__version__ = "0.1.0"

from barelyml.core import BarelyMLDocument, LinkActivator, height_required, layout_document
from barelyml.formats import SUPPORTED_DIALECTS, convert, get_converter
from barelyml.formatting import ColorPalette, Document, FontSpec, ParseOptions
from barelyml.formatting.parser import parse_document

__all__ = [
    "__version__",
    "BarelyMLDocument",
    "LinkActivator",
    "height_required",
    "layout_document",
    "SUPPORTED_DIALECTS",
    "convert",
    "get_converter",
    "ColorPalette",
    "Document",
    "FontSpec",
    "ParseOptions",
    "parse_document",
]
