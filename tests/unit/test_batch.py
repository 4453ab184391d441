"""Tests for applying a transform across a glyph collection."""

from unittest.mock import MagicMock

import pytest

from glyphstyler.core.batch import (
    BatchResult,
    GlyphCollection,
    apply_to_collection,
)
from glyphstyler.core.transforms import axis_scale, flatten
from glyphstyler.domain import Close, LineTo, MoveTo, QuadTo
from glyphstyler.exceptions import BatchError, GlyphTransformError, WriteBackError
from glyphstyler.utils import ProcessingLogger

TRIANGLE = (MoveTo(0, 0), LineTo(100, 0), LineTo(50, 100), Close())
BOWL = (MoveTo(0, 0), QuadTo(50, 100, 100, 0), Close())


class ListCollection:
    """In-memory glyph collection backed by a list of outlines."""

    def __init__(self, outlines, reject=()):
        self.outlines = list(outlines)
        self.reject = set(reject)
        self.reads = []
        self.writes = []

    def count(self):
        return len(self.outlines)

    def get_outline(self, index):
        self.reads.append(index)
        return self.outlines[index]

    def set_outline(self, index, outline):
        if index in self.reject:
            return False
        self.writes.append(index)
        self.outlines[index] = outline
        return True


class UnreadableCollection(ListCollection):
    """Collection whose getter raises for one index."""

    def get_outline(self, index):
        if index in self.reject:
            raise ValueError("decode broke")
        return super().get_outline(index)


class RaisingCollection(ListCollection):
    """Collection whose setter raises for one index."""

    def set_outline(self, index, outline):
        if index in self.reject:
            raise OSError("disk full")
        return super().set_outline(index, outline)


def failing_at(bad_outline):
    """Build a transform that raises for one specific outline."""

    def transform(outline):
        if outline is bad_outline:
            raise ValueError("cannot style this glyph")
        return flatten(outline)

    return transform


class TestApplyToCollection:
    """Tests for apply_to_collection."""

    def test_protocol(self):
        """In-memory collection satisfies the collection protocol."""
        assert isinstance(ListCollection([]), GlyphCollection)

    def test_transforms_and_skips(self):
        """Empty and missing outlines are skipped, others replaced."""
        collection = ListCollection([TRIANGLE, (), BOWL, None])

        result = apply_to_collection(collection, flatten)

        assert isinstance(result, BatchResult)
        assert result.transformed == [0, 2]
        assert result.skipped == [1, 3]
        assert collection.outlines[0] == TRIANGLE
        assert collection.outlines[1] == ()
        assert collection.outlines[2] == (MoveTo(0, 0), LineTo(100, 0), Close())
        assert collection.outlines[3] is None

    def test_ascending_order(self):
        """Glyphs are read and written in index order."""
        collection = ListCollection([TRIANGLE, BOWL, TRIANGLE, BOWL])

        apply_to_collection(collection, flatten)

        assert collection.reads == [0, 1, 2, 3]
        assert collection.writes == [0, 1, 2, 3]

    def test_empty_collection(self):
        """A collection without glyphs is a no-op."""
        result = apply_to_collection(ListCollection([]), flatten)
        assert result.transformed == []
        assert result.skipped == []

    def test_transform_failure_aborts(self):
        """First failing glyph stops the batch and is reported by index."""
        bad = (MoveTo(1, 1), LineTo(2, 2), Close())
        collection = ListCollection([BOWL, bad, BOWL])

        with pytest.raises(GlyphTransformError) as exc_info:
            apply_to_collection(collection, failing_at(bad))

        assert exc_info.value.glyph_index == 1
        assert "cannot style this glyph" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_committed_glyphs_stay_written(self):
        """Glyphs before the failure keep their new outlines."""
        bad = (MoveTo(1, 1), LineTo(2, 2), Close())
        collection = ListCollection([BOWL, bad, BOWL])

        with pytest.raises(BatchError):
            apply_to_collection(collection, failing_at(bad))

        assert collection.outlines[0] == (MoveTo(0, 0), LineTo(100, 0), Close())
        assert collection.outlines[1] is bad
        assert collection.outlines[2] == BOWL
        assert collection.reads == [0, 1]

    def test_rejected_write_back(self):
        """A setter returning False aborts with a write-back error."""
        collection = ListCollection([TRIANGLE, TRIANGLE, TRIANGLE], reject={1})

        with pytest.raises(WriteBackError) as exc_info:
            apply_to_collection(collection, flatten)

        assert exc_info.value.glyph_index == 1
        assert collection.writes == [0]

    def test_raising_write_back(self):
        """A setter exception is wrapped with the glyph index."""
        collection = RaisingCollection([TRIANGLE, TRIANGLE], reject={0})

        with pytest.raises(WriteBackError) as exc_info:
            apply_to_collection(collection, flatten)

        assert exc_info.value.glyph_index == 0
        assert "disk full" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_no_retry(self):
        """A failing glyph is attempted exactly once."""
        calls = []

        def transform(outline):
            calls.append(outline)
            raise RuntimeError("boom")

        with pytest.raises(GlyphTransformError):
            apply_to_collection(ListCollection([TRIANGLE, BOWL]), transform)

        assert calls == [TRIANGLE]

    def test_progress_callback(self):
        """Progress is reported once per glyph, skipped ones included."""
        updates = []
        collection = ListCollection([TRIANGLE, None, BOWL])

        apply_to_collection(
            collection, flatten, progress_callback=lambda done, total: updates.append((done, total))
        )

        assert updates == [(1, 3), (2, 3), (3, 3)]

    def test_statistics(self):
        """Logger collects processed, skipped and error counts."""
        logger = ProcessingLogger()
        collection = ListCollection([TRIANGLE, (), BOWL])

        apply_to_collection(collection, lambda o: axis_scale(o, 0.5, 1), logger=logger)

        assert logger.stats.processed_count == 2
        assert logger.stats.skipped_count == 1
        assert logger.stats.error_count == 0
        assert len(logger.stats.glyph_timings_ms) == 2

    def test_error_statistics(self):
        """A failure is recorded once with its glyph index."""
        logger = ProcessingLogger()
        bad = (MoveTo(1, 1), Close())

        with pytest.raises(GlyphTransformError):
            apply_to_collection(ListCollection([bad]), failing_at(bad), logger=logger)

        assert logger.stats.error_count == 1
        assert logger.stats.errors[0][0] == 0

    def test_read_failure_aborts(self):
        """A getter exception is reported with the glyph index."""
        logger = ProcessingLogger()
        collection = UnreadableCollection([TRIANGLE, TRIANGLE, TRIANGLE], reject={1})

        with pytest.raises(GlyphTransformError) as exc_info:
            apply_to_collection(collection, flatten, logger=logger)

        assert exc_info.value.glyph_index == 1
        assert "decode broke" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert collection.writes == [0]
        assert logger.stats.errors[0][0] == 1

    def test_completion_logs_outline_shape(self):
        """Completed glyphs are logged with subpath and point counts."""
        structured = MagicMock()
        outline = (MoveTo(0, 0), QuadTo(50, 100, 100, 0), Close(), MoveTo(10, 10), Close())

        apply_to_collection(
            ListCollection([outline]), flatten, logger=ProcessingLogger(structured)
        )

        completed = [
            c for c in structured.debug.call_args_list if c.args[0] == "Glyph transformed"
        ]
        assert len(completed) == 1
        assert completed[0].kwargs["subpaths"] == 2
        assert completed[0].kwargs["points"] == 3
        assert completed[0].kwargs["commands"] == 5
