"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from glyphstyler.config import (
    GlyphStylerSettings,
    ProcessingConfig,
    StyleConfig,
    StyleName,
    get_default_settings,
)


class TestStyleConfig:
    """Tests for StyleConfig."""

    def test_defaults(self):
        config = StyleConfig()
        assert config.bold_factor == 1.15
        assert config.thin_scale == 0.9
        assert config.wide_scale_x == 1.3
        assert config.condensed_scale_x == 0.75
        assert config.slant_degrees == 15.0
        assert config.pixel_grid == 50.0
        assert config.jitter_intensity == 20.0
        assert config.punk_intensity == 80.0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"pixel_grid": 0},
            {"bold_factor": 0},
            {"slant_degrees": 90},
            {"jitter_intensity": -1},
            {"condensed_scale_x": 1.5},
        ],
    )
    def test_rejects_out_of_range(self, overrides):
        with pytest.raises(ValidationError):
            StyleConfig(**overrides)


class TestSettings:
    """Tests for GlyphStylerSettings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, GlyphStylerSettings)
        assert settings.processing.skip_composite is True
        assert settings.processing.seed is None
        assert settings.processing.rename_font is True
        assert settings.logging.log_file is None

    def test_copy_with_updates(self):
        settings = get_default_settings()
        updated = settings.model_copy(
            update={"processing": ProcessingConfig(seed=7, rename_font=False)}
        )
        assert updated.processing.seed == 7
        assert settings.processing.seed is None

    def test_style_names(self):
        assert [s.value for s in StyleName] == [
            "bold",
            "thin",
            "wide",
            "condensed",
            "italic",
            "flatten",
            "pixelate",
            "jitter",
            "punk",
        ]
