"""Tests for logging utilities and processing statistics."""

import json
import logging

from glyphstyler.utils import ProcessingLogger, ProcessingStats, configure_logging


class TestProcessingStats:
    """Tests for ProcessingStats."""

    def test_duration(self):
        stats = ProcessingStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unfinished(self):
        assert ProcessingStats(start_time=10.0).duration_seconds == 0.0

    def test_glyph_timings(self):
        stats = ProcessingStats(glyph_timings_ms=[1.0, 3.0, 2.0])
        assert stats.avg_glyph_time_ms == 2.0
        assert stats.min_glyph_time_ms == 1.0
        assert stats.max_glyph_time_ms == 3.0

    def test_no_timings(self):
        stats = ProcessingStats()
        assert stats.avg_glyph_time_ms is None
        assert stats.min_glyph_time_ms is None


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_handlers_not_duplicated(self):
        """Test configuring twice keeps one console handler."""
        configure_logging()
        configure_logging()

        marked = [
            h for h in logging.getLogger().handlers if getattr(h, "_glyphstyler_handler", False)
        ]
        assert len(marked) == 1

    def test_file_output(self, tmp_path):
        """Test file handler receives JSON lines at debug level."""
        log_file = tmp_path / "styling.log"
        logger = configure_logging(log_file=log_file, quiet=True)

        ProcessingLogger(logger).log_glyph_complete(4, "A", 12, 0.5)

        lines = [json.loads(line.split(" | ", 3)[3]) for line in log_file.read_text().splitlines()]
        events = {entry["event"]: entry for entry in lines}
        assert events["Glyph transformed"]["index"] == 4
        assert events["Glyph transformed"]["commands"] == 12

    def test_quiet_console(self):
        configure_logging(console_level="DEBUG", quiet=True)
        console = [
            h
            for h in logging.getLogger().handlers
            if getattr(h, "_glyphstyler_handler", False)
            and not isinstance(h, logging.FileHandler)
        ]
        assert console[0].level == logging.ERROR


class TestProcessingLogger:
    """Tests for ProcessingLogger."""

    def test_counts(self):
        logger = ProcessingLogger()
        logger.log_glyph_start(0, "A")
        logger.log_glyph_complete(0, "A", 5, 1.5)
        logger.log_glyph_skipped(1, "space", "no outline")
        logger.log_glyph_error(2, "B", ValueError("bad"))

        stats = logger.stats
        assert stats.processed_count == 1
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors == [(2, "bad")]
        assert stats.glyph_timings_ms == [1.5]
