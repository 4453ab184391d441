"""Geometric style transforms over glyph outlines.

Every operator maps one outline to a new outline:
- Pure: the input is never mutated, no shared mutable state
- Total: defined for any well-formed outline, the empty one included
- Shape preserving: subpath count, command order and command count are kept;
  only ``flatten`` changes command kinds, one for one

Key functions:
- jitter: random offset on every coordinate
- expand: scale about the anchor centroid (bold / light)
- axis_scale: per-axis scale about the anchor centroid (wide / condensed)
- slant: horizontal shear (fake italic)
- pixelate: snap every coordinate to a grid
- flatten: replace curves by straight lines
- punk: random offset on control handles only
"""

import random
from collections.abc import Callable

from glyphstyler.core.geometry import centroid, scale_about, shear_x, slant_tangent, snap
from glyphstyler.domain.commands import (
    POINT_FIELDS,
    CubicTo,
    LineTo,
    Outline,
    PathCommand,
    QuadTo,
    field_names,
    iter_points,
    replace_fields,
)

Transform = Callable[[Outline], Outline]

_CONTROL_FIELDS = frozenset({"x1", "y1", "x2", "y2"})
_default_rng = random.Random()


def _map_fields(
    outline: Outline,
    fn: Callable[[str, float], float],
    only: frozenset[str] | None = None,
) -> Outline:
    """Apply fn to every coordinate field, or only to the named fields."""
    result: list[PathCommand] = []
    for cmd in outline:
        changes = {
            name: fn(name, getattr(cmd, name))
            for name in field_names(cmd)
            if only is None or name in only
        }
        result.append(replace_fields(cmd, **changes))
    return tuple(result)


def _map_points(
    outline: Outline, fn: Callable[[float, float], tuple[float, float]]
) -> Outline:
    """Apply fn to every (x, y) pair of every command."""
    result: list[PathCommand] = []
    for cmd in outline:
        changes: dict[str, float] = {}
        for key, x, y in iter_points(cmd):
            x_field, y_field = POINT_FIELDS[key]
            changes[x_field], changes[y_field] = fn(x, y)
        result.append(replace_fields(cmd, **changes))
    return tuple(result)


def jitter(
    outline: Outline, intensity: float, rng: random.Random | None = None
) -> Outline:
    """Offset every coordinate by uniform noise in [-intensity/2, intensity/2].

    Each axis of each point draws its own offset. Anchors and handles are
    both perturbed, so reapplying compounds the noise.

    Args:
        outline: Source outline
        intensity: Width of the noise interval in font units
        rng: Random source; a module-level generator when None

    Returns:
        New outline with perturbed coordinates
    """
    rng = rng if rng is not None else _default_rng
    half = intensity / 2
    return _map_fields(outline, lambda _, v: v + rng.uniform(-half, half))


def punk(
    outline: Outline, intensity: float, rng: random.Random | None = None
) -> Outline:
    """Offset control handles only, leaving every anchor in place.

    Exaggerates curvature while keeping the points the outline passes
    through where they were.
    """
    rng = rng if rng is not None else _default_rng
    half = intensity / 2
    return _map_fields(
        outline, lambda _, v: v + rng.uniform(-half, half), only=_CONTROL_FIELDS
    )


def expand(outline: Outline, factor: float) -> Outline:
    """Scale every coordinate about the anchor centroid.

    The centroid only averages anchor points, but control handles are
    scaled about it as well. A factor above 1 expands (bold), below 1
    contracts. An outline without anchors is returned unchanged.
    """
    return axis_scale(outline, factor, factor)


def axis_scale(outline: Outline, scale_x: float, scale_y: float) -> Outline:
    """Scale about the anchor centroid with independent per-axis factors.

    Used for wide, condensed and thin styles.

    Examples:
        >>> from glyphstyler.domain import MoveTo, LineTo, Close, to_path_syntax
        >>> square = (MoveTo(0, 0), LineTo(100, 0), LineTo(100, 100), LineTo(0, 100), Close())
        >>> to_path_syntax(axis_scale(square, 0.5, 1))
        'M 25.0 0.0 L 75.0 0.0 L 75.0 100.0 L 25.0 100.0 Z'
    """
    center = centroid(outline)
    if center is None:
        return outline

    cx, cy = center
    return _map_points(
        outline,
        lambda x, y: (scale_about(x, cx, scale_x), scale_about(y, cy, scale_y)),
    )


def slant(outline: Outline, degrees: float) -> Outline:
    """Shear horizontally to simulate an italic.

    Each point is sheared by its own y, ``x' = x + y * tan(degrees)``.
    Positive angles lean right. ``slant(-d)`` undoes ``slant(d)``.
    """
    tangent = slant_tangent(degrees)
    return _map_points(outline, lambda x, y: (shear_x(x, y, tangent), y))


def pixelate(outline: Outline, grid_size: float) -> Outline:
    """Snap every coordinate to the nearest multiple of grid_size.

    Command kinds are unchanged; curves keep their (snapped) handles.

    Raises:
        ValueError: If grid_size is not positive
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive, got {grid_size}")
    return _map_fields(outline, lambda _, v: snap(v, grid_size))


def flatten(outline: Outline) -> Outline:
    """Replace every curve by a straight line to its endpoint.

    Control coordinates are discarded. MoveTo, LineTo and Close pass
    through, so flattening twice equals flattening once.
    """
    result: list[PathCommand] = []
    for cmd in outline:
        if isinstance(cmd, (QuadTo, CubicTo)):
            result.append(LineTo(cmd.x, cmd.y))
        else:
            result.append(cmd)
    return tuple(result)


__all__ = [
    "Transform",
    "axis_scale",
    "expand",
    "flatten",
    "jitter",
    "pixelate",
    "punk",
    "slant",
]
