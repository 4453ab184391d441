"""Named style presets built from the transform operators."""

import random
from functools import partial

from glyphstyler.config import StyleConfig, StyleName
from glyphstyler.core.transforms import (
    Transform,
    axis_scale,
    expand,
    flatten,
    jitter,
    pixelate,
    punk,
    slant,
)
from glyphstyler.exceptions import UnknownStyleError

STYLE_DESCRIPTIONS: dict[StyleName, str] = {
    StyleName.BOLD: "Expands glyphs from their center",
    StyleName.THIN: "Contracts glyphs towards their center",
    StyleName.WIDE: "Stretches glyphs horizontally",
    StyleName.CONDENSED: "Compresses glyphs horizontally",
    StyleName.ITALIC: "Shears glyphs to simulate an italic",
    StyleName.FLATTEN: "Converts all curves into straight lines",
    StyleName.PIXELATE: "Snaps all points to a coarse grid",
    StyleName.JITTER: "Randomizes point placement for a hand-drawn look",
    StyleName.PUNK: "Shifts curve handles while keeping anchors fixed",
}


def parse_style(name: str | StyleName) -> StyleName:
    """Resolve a style name, case-insensitively.

    Raises:
        UnknownStyleError: If no preset has that name
    """
    if isinstance(name, StyleName):
        return name
    try:
        return StyleName(name.strip().lower())
    except ValueError:
        raise UnknownStyleError(name) from None


def build_transform(
    style: str | StyleName,
    config: StyleConfig | None = None,
    rng: random.Random | None = None,
) -> Transform:
    """Build the outline transform for a style preset.

    Args:
        style: Preset name
        config: Preset parameters (defaults when None)
        rng: Random source for jitter and punk

    Returns:
        Callable mapping an outline to its styled version

    Raises:
        UnknownStyleError: If no preset has that name
    """
    style = parse_style(style)
    config = config or StyleConfig()

    if style is StyleName.BOLD:
        return partial(expand, factor=config.bold_factor)
    if style is StyleName.THIN:
        return partial(axis_scale, scale_x=config.thin_scale, scale_y=config.thin_scale)
    if style is StyleName.WIDE:
        return partial(axis_scale, scale_x=config.wide_scale_x, scale_y=1.0)
    if style is StyleName.CONDENSED:
        return partial(axis_scale, scale_x=config.condensed_scale_x, scale_y=1.0)
    if style is StyleName.ITALIC:
        return partial(slant, degrees=config.slant_degrees)
    if style is StyleName.FLATTEN:
        return flatten
    if style is StyleName.PIXELATE:
        return partial(pixelate, grid_size=config.pixel_grid)
    if style is StyleName.JITTER:
        return partial(jitter, intensity=config.jitter_intensity, rng=rng)
    return partial(punk, intensity=config.punk_intensity, rng=rng)


def describe_parameters(style: StyleName, config: StyleConfig | None = None) -> str:
    """Human-readable summary of a preset's parameters."""
    config = config or StyleConfig()
    summaries = {
        StyleName.BOLD: f"factor {config.bold_factor}",
        StyleName.THIN: f"scale {config.thin_scale} x {config.thin_scale}",
        StyleName.WIDE: f"scale {config.wide_scale_x} x 1.0",
        StyleName.CONDENSED: f"scale {config.condensed_scale_x} x 1.0",
        StyleName.ITALIC: f"{config.slant_degrees} degrees",
        StyleName.FLATTEN: "-",
        StyleName.PIXELATE: f"grid {config.pixel_grid}",
        StyleName.JITTER: f"intensity {config.jitter_intensity}",
        StyleName.PUNK: f"intensity {config.punk_intensity}",
    }
    return summaries[style]
