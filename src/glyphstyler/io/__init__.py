"""Font I/O layer for glyphstyler.

This module handles reading and writing font files using fonttools.
It provides a clean abstraction layer between fonttools and the
path command model.

Key responsibilities:
- Load TTF/OTF/WOFF/WOFF2 fonts
- Decode glyph outlines into commands and encode them back
- Expose a font's glyphs as an indexed collection
- Read and write name table metadata
- Write modified fonts with proper naming convention

Key classes:
- FontReader: Load fonts and decode outlines
- FontGlyphCollection: Glyph-order-indexed outline access
- FontWriter: Save modified fonts
"""

from glyphstyler.io.collection import FontGlyphCollection
from glyphstyler.io.converter import OutlinePen, draw_outline
from glyphstyler.io.names import FontMetadata, add_style_suffix, read_metadata, write_metadata
from glyphstyler.io.reader import FontReader
from glyphstyler.io.writer import FontWriter

__all__ = [
    "FontGlyphCollection",
    "FontMetadata",
    "FontReader",
    "FontWriter",
    "OutlinePen",
    "add_style_suffix",
    "draw_outline",
    "read_metadata",
    "write_metadata",
]
