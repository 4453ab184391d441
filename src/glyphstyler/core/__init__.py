"""Core processing algorithms for glyphstyler.

This module contains the outline transform engine:

- Geometry helpers (anchor centroid, scaling, shear, grid snap)
- Transform operators (jitter, expand, axis_scale, slant, pixelate,
  flatten, punk)
- Style presets built from those operators
- Batch application over a glyph collection

All transforms are:
- Pure (no side effects, inputs never mutated)
- Total (defined for every outline, the empty one included)

Key functions:
- build_transform: Resolve a style preset to an outline transform
- apply_to_collection: Apply a transform to every glyph of a collection

Key classes:
- FontProcessor: Load, style and save a font file
"""

from glyphstyler.core.batch import BatchResult, GlyphCollection, apply_to_collection
from glyphstyler.core.geometry import centroid, snap
from glyphstyler.core.processor import FontProcessor
from glyphstyler.core.styles import build_transform, parse_style
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

__all__ = [
    # Batch
    "BatchResult",
    "GlyphCollection",
    "apply_to_collection",
    # Processor
    "FontProcessor",
    # Geometry
    "centroid",
    "snap",
    # Styles
    "build_transform",
    "parse_style",
    # Transforms
    "Transform",
    "axis_scale",
    "expand",
    "flatten",
    "jitter",
    "pixelate",
    "punk",
    "slant",
]
