"""Font writer for saving styled fonts.

This module provides the FontWriter class for writing modified fonts
with the styled naming convention.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from glyphstyler.exceptions import FontSaveError
from glyphstyler.io.names import add_style_suffix


class FontWriter:
    """Writes modified fonts with styled naming convention.

    The web font flavor of the loaded font (woff, woff2) is kept.

    Example:
        writer = FontWriter(font, Path("output.ttf"))
        writer.save(style_suffix=" Bold")
    """

    def __init__(self, font: TTFont, output_path: Path) -> None:
        """Initialize the font writer.

        Args:
            font: The fonttools TTFont object to write
            output_path: Path where the font will be saved
        """
        self._font = font
        self._output_path = output_path

    def save(self, style_suffix: str | None = None) -> None:
        """Save the font file to the output path.

        Args:
            style_suffix: Appended to family names when given, so the
                styled font can coexist with the original

        Raises:
            FontSaveError: If file cannot be written
        """
        if style_suffix:
            add_style_suffix(self._font, style_suffix)

        try:
            self._font.save(str(self._output_path))
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_styled_path(input_path: Path, style: str) -> Path:
        """Generate output path with the style name appended.

        Converts: font.ttf, bold -> font-Bold.ttf
                  Roboto-Regular.woff2, italic -> Roboto-Regular-Italic.woff2

        Args:
            input_path: Original font file path
            style: Style name

        Returns:
            Path with -{Style} suffix before extension
        """
        styled_name = f"{input_path.stem}-{style.capitalize()}{input_path.suffix}"
        return input_path.parent / styled_name
