"""Configuration settings for Glyphstyler."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class StyleName(str, Enum):
    """Named style presets."""

    BOLD = "bold"
    THIN = "thin"
    WIDE = "wide"
    CONDENSED = "condensed"
    ITALIC = "italic"
    FLATTEN = "flatten"
    PIXELATE = "pixelate"
    JITTER = "jitter"
    PUNK = "punk"


class StyleConfig(BaseModel):
    """Parameters of the style presets.

    Distances are in font units; the defaults suit a 1000 UPM font.
    """

    bold_factor: float = Field(
        default=1.15,
        gt=0.0,
        le=4.0,
        description="Expansion factor about the glyph centroid for bold",
    )
    thin_scale: float = Field(
        default=0.9,
        gt=0.0,
        le=1.0,
        description="Uniform contraction factor for thin",
    )
    wide_scale_x: float = Field(
        default=1.3,
        ge=1.0,
        le=4.0,
        description="Horizontal stretch for wide",
    )
    condensed_scale_x: float = Field(
        default=0.75,
        gt=0.0,
        le=1.0,
        description="Horizontal compression for condensed",
    )
    slant_degrees: float = Field(
        default=15.0,
        gt=-90.0,
        lt=90.0,
        description="Shear angle for italic, positive leans right",
    )
    pixel_grid: float = Field(
        default=50.0,
        gt=0.0,
        description="Grid size for pixelate",
    )
    jitter_intensity: float = Field(
        default=20.0,
        ge=0.0,
        description="Noise interval width for jitter",
    )
    punk_intensity: float = Field(
        default=80.0,
        ge=0.0,
        description="Noise interval width for punk (handles only)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for font processing."""

    skip_composite: bool = Field(
        default=True,
        description="Leave composite glyphs untouched",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for jitter and punk (None = nondeterministic)",
    )
    rename_font: bool = Field(
        default=True,
        description="Append the style name to the font's family names on save",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphStylerSettings(BaseModel):
    """Main application settings."""

    style: StyleConfig = Field(default_factory=StyleConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphStylerSettings:
    """Get default application settings."""
    return GlyphStylerSettings()
