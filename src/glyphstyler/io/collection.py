"""Glyph collection over a fonttools font.

Exposes a font's glyphs in glyph order through the count / get_outline /
set_outline interface the batch applicator consumes.
"""

from typing import Any

from fontTools.ttLib import TTFont

from glyphstyler.domain import Outline
from glyphstyler.io.converter import GlyfSnapshot, decode_glyph, encode_glyph, is_composite


class FontGlyphCollection:
    """Index-addressed view of a font's glyph outlines.

    Composite glyphs are decomposed from a snapshot of the glyf table taken
    at construction, so a composite never picks up a base glyph that was
    rewritten earlier in the same batch.

    Example:
        collection = FontGlyphCollection(font)
        outline = collection.get_outline(3)
        collection.set_outline(3, flatten(outline))
    """

    def __init__(self, font: TTFont, skip_composite: bool = True) -> None:
        """Initialize the collection.

        Args:
            font: Loaded fonttools font, modified in place by set_outline
            skip_composite: Report composite glyphs as having no outline
        """
        self._font = font
        self._skip_composite = skip_composite
        self._glyph_order = font.getGlyphOrder()
        self._glyph_set: Any = None
        self._composite_source: GlyfSnapshot | None = None
        if not skip_composite and "glyf" in font:
            self._composite_source = GlyfSnapshot(font["glyf"])

    def count(self) -> int:
        return len(self._glyph_order)

    def glyph_name(self, index: int) -> str:
        return self._glyph_order[index]

    def get_outline(self, index: int) -> Outline | None:
        """Decode the outline of the glyph at an index.

        Returns:
            Outline (possibly empty), or None for skipped composites
        """
        name = self._glyph_order[index]
        if is_composite(self._font, name):
            if self._composite_source is None:
                return None
            return decode_glyph(self._composite_source, name)

        if self._glyph_set is None:
            self._glyph_set = self._font.getGlyphSet()
        return decode_glyph(self._glyph_set, name)

    def set_outline(self, index: int, outline: Outline) -> bool:
        """Replace the outline of the glyph at an index.

        Returns:
            False if the font's outline format cannot be written
        """
        return encode_glyph(self._font, self._glyph_order[index], outline)
