"""Apply one transform to every glyph of a font-like collection.

The collection is consumed, not owned: the batch reads each outline, runs
the transform, and writes the result back through the collection's setter.
That setter call is the only place glyph data changes.

Glyphs are processed one at a time in ascending index order so exports are
reproducible. The first failure stops the batch; glyphs already written stay
written.
"""

import time
import traceback
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from glyphstyler.core.transforms import Transform
from glyphstyler.domain import Outline
from glyphstyler.domain.commands import coordinate_count, subpath_count
from glyphstyler.exceptions import GlyphTransformError, WriteBackError
from glyphstyler.utils import ProcessingLogger


@runtime_checkable
class GlyphCollection(Protocol):
    """Indexed glyph collection the batch applicator reads and writes."""

    def count(self) -> int: ...

    def get_outline(self, index: int) -> Outline | None: ...

    def set_outline(self, index: int, outline: Outline) -> bool: ...


@dataclass
class BatchResult:
    """Indices touched by a batch run."""

    transformed: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)


def _glyph_name(collection: GlyphCollection, index: int) -> str | None:
    # Font-backed collections can name their glyphs for nicer logs
    name_of = getattr(collection, "glyph_name", None)
    return name_of(index) if callable(name_of) else None


def apply_to_collection(
    collection: GlyphCollection,
    transform: Transform,
    logger: ProcessingLogger | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> BatchResult:
    """Transform every non-empty outline of a collection in place.

    Args:
        collection: Glyph collection to read and write
        transform: Outline transform to apply
        logger: Processing logger collecting statistics
        progress_callback: Optional callback(completed, total) after each glyph

    Returns:
        BatchResult listing transformed and skipped glyph indices

    Raises:
        GlyphTransformError: If reading or transforming a glyph raises
        WriteBackError: If the collection rejects an updated outline
    """
    logger = logger or ProcessingLogger()
    result = BatchResult()
    total = collection.count()

    for index in range(total):
        name = _glyph_name(collection, index)
        try:
            outline = collection.get_outline(index)
        except Exception as e:
            logger.log_glyph_error(index, name, e, traceback.format_exc())
            raise GlyphTransformError(index, f"could not read outline: {e}") from e

        if not outline:
            logger.log_glyph_skipped(index, name, "no outline")
            result.skipped.append(index)
            if progress_callback is not None:
                progress_callback(index + 1, total)
            continue

        logger.log_glyph_start(index, name)
        start_time = time.perf_counter()

        try:
            new_outline = transform(outline)
        except Exception as e:
            logger.log_glyph_error(index, name, e, traceback.format_exc())
            raise GlyphTransformError(index, str(e)) from e

        try:
            accepted = collection.set_outline(index, new_outline)
        except Exception as e:
            logger.log_glyph_error(index, name, e, traceback.format_exc())
            raise WriteBackError(index, str(e)) from e

        if not accepted:
            error = WriteBackError(index, "collection rejected the outline")
            logger.log_glyph_error(index, name, error)
            raise error

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.log_glyph_complete(
            index,
            name,
            len(new_outline),
            duration_ms,
            subpaths=subpath_count(new_outline),
            points=coordinate_count(new_outline),
        )
        result.transformed.append(index)
        if progress_callback is not None:
            progress_callback(index + 1, total)

    return result
