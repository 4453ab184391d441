"""Configuration management for glyphstyler.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StyleConfig: Style preset parameters
- ProcessingConfig: Font processing settings
- LoggingConfig: Logging settings
- GlyphStylerSettings: Main application settings
"""

from glyphstyler.config.settings import (
    GlyphStylerSettings,
    LoggingConfig,
    ProcessingConfig,
    StyleConfig,
    StyleName,
    get_default_settings,
)

__all__ = [
    "GlyphStylerSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "StyleConfig",
    "StyleName",
    "get_default_settings",
]
