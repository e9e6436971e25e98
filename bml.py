#!/usr/bin/env python3
"""
BarelyML - minimal markup parser and dialect converter

Simple usage:
    python bml.py show notes.bml                     # Print blocks, links and heights
    python bml.py convert notes.md --to barelyml     # Markdown -> BarelyML on stdout
    python bml.py convert page.dw --to asciidoc -o page.adoc
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from barelyml.cli import app

if __name__ == "__main__":
    app()
