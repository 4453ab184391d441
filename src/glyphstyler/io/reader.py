"""Font reader for loading TTF/OTF/WOFF fonts.

This module provides the FontReader class for loading font files
and decoding glyph outlines into the path command model.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from glyphstyler.domain import Outline
from glyphstyler.io.converter import decode_glyph


class FontReader:
    """Loads TTF/OTF/WOFF/WOFF2 fonts and decodes glyph outlines.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        outline = reader.get_outline("A")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    @property
    def font(self) -> TTFont:
        """Return the loaded fonttools font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf fonts, 'OpenType' for CFF fonts
        """
        font = self.font
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def flavor(self) -> str | None:
        """Return the web font flavor ('woff', 'woff2') or None for sfnt."""
        return self.font.flavor

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self.font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self.font["maxp"].numGlyphs  # type: ignore[attr-defined]

    @property
    def glyph_order(self) -> list[str]:
        """Return glyph names in glyph index order."""
        return self.font.getGlyphOrder()

    def get_outline(self, name: str) -> Outline | None:
        """Decode a glyph's outline by name.

        Args:
            name: Name of the glyph to decode

        Returns:
            Outline, or None if the glyph is not in the font
        """
        font = self.font
        if name not in font.getGlyphOrder():
            return None
        return decode_glyph(font.getGlyphSet(), name)

    def glyph_name_for_char(self, char: str) -> str | None:
        """Look up the glyph mapped to a character in the best cmap."""
        if len(char) != 1:
            return None
        cmap = self.font.getBestCmap()
        if not cmap:
            return None
        return cmap.get(ord(char))

    def resolve_glyph_name(self, name_or_char: str) -> str | None:
        """Resolve a glyph name, or a single character through the cmap."""
        if name_or_char in self.font.getGlyphOrder():
            return name_or_char
        return self.glyph_name_for_char(name_or_char)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
