"""Font styling orchestration.

This module coordinates the full styling workflow: load a font, apply one
style preset to every glyph outline, and save the result.

Key components:
- FontProcessor: Main orchestrator class for font processing
"""

import random
import time
from collections.abc import Callable
from pathlib import Path

from glyphstyler.config import GlyphStylerSettings, StyleName
from glyphstyler.core.batch import apply_to_collection
from glyphstyler.core.styles import build_transform, parse_style
from glyphstyler.exceptions import BatchError, FontLoadError
from glyphstyler.io import FontGlyphCollection, FontReader, FontWriter
from glyphstyler.utils import ProcessingLogger, ProcessingStats, configure_logging


class FontProcessor:
    """Orchestrates font styling.

    Manages the complete workflow:
    1. Load font file
    2. Build the transform for the requested style
    3. Apply it to every glyph in glyph order
    4. Save modified font

    Glyphs are processed sequentially so the output is reproducible. If a
    glyph fails, the error propagates and no file is written.

    Example:
        settings = GlyphStylerSettings()
        processor = FontProcessor(settings)
        stats = processor.process(
            font_path=Path("font.ttf"),
            style="bold",
        )
    """

    def __init__(self, config: GlyphStylerSettings) -> None:
        """Initialize font processor with configuration.

        Args:
            config: Glyphstyler settings containing style and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )

    def _make_rng(self) -> random.Random | None:
        seed = self.config.processing.seed
        return random.Random(seed) if seed is not None else None

    def process(
        self,
        font_path: Path,
        style: str | StyleName,
        output_path: Path | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> ProcessingStats:
        """Apply a style preset to every glyph of a font file.

        Args:
            font_path: Path to input font file
            style: Style preset name
            output_path: Path for output font (auto-generated if None)
            progress_callback: Optional callback(completed, total) for
                progress updates

        Returns:
            ProcessingStats with counts and timing

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file is not a readable font
            UnknownStyleError: If the style preset does not exist
            GlyphTransformError: If a glyph fails to transform
            WriteBackError: If a glyph cannot be written back
            FontSaveError: If the output cannot be written
        """
        style = parse_style(style)
        transform = build_transform(style, self.config.style, rng=self._make_rng())

        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        if output_path is None:
            output_path = FontWriter.get_styled_path(font_path, style.value)

        self.logger.info(
            "Starting font processing",
            input=str(font_path),
            output=str(output_path),
            style=style.value,
        )

        reader = FontReader(font_path)
        try:
            reader.load()
        except FileNotFoundError:
            raise
        except Exception as e:
            raise FontLoadError(str(font_path), str(e)) from e

        try:
            self.logger.info(
                "Font loaded",
                format=reader.format,
                flavor=reader.flavor,
                upm=reader.units_per_em,
                glyph_count=reader.glyph_count,
            )

            collection = FontGlyphCollection(
                reader.font,
                skip_composite=self.config.processing.skip_composite,
            )

            try:
                apply_to_collection(
                    collection,
                    transform,
                    logger=processing_logger,
                    progress_callback=progress_callback,
                )
            except BatchError as e:
                self.logger.error(
                    "Styling aborted",
                    glyph_index=e.glyph_index,
                    glyph=collection.glyph_name(e.glyph_index),
                    committed=stats.processed_count,
                )
                raise

            suffix = f" {style.value.capitalize()}" if self.config.processing.rename_font else None
            FontWriter(reader.font, output_path).save(style_suffix=suffix)

            self.logger.info("Font saved", output=str(output_path))

        finally:
            reader.close()

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats
