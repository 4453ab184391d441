"""Geometric operations for outline transforms.

This module provides the coordinate math the transform operators share:
- Anchor centroid of an outline
- Scaling about a fixed point
- Horizontal shear
- Grid snapping

All functions are pure and stateless.
"""

import math

from glyphstyler.domain import Outline


def centroid(outline: Outline) -> tuple[float, float] | None:
    """Calculate the mean of all anchor points of an outline.

    Only the main ``(x, y)`` point of each command contributes; control
    handles are ignored.

    Args:
        outline: Outline to measure

    Returns:
        ``(cx, cy)``, or None if the outline has no anchors

    Examples:
        >>> from glyphstyler.domain import MoveTo, LineTo, Close
        >>> centroid((MoveTo(0, 0), LineTo(100, 0), LineTo(100, 100), LineTo(0, 100), Close()))
        (50.0, 50.0)
    """
    sum_x = 0.0
    sum_y = 0.0
    count = 0

    for cmd in outline:
        if "main" in cmd.point_keys:
            sum_x += cmd.x  # type: ignore[union-attr]
            sum_y += cmd.y  # type: ignore[union-attr]
            count += 1

    if count == 0:
        return None
    return (sum_x / count, sum_y / count)


def scale_about(value: float, center: float, factor: float) -> float:
    """Scale a single coordinate about a center: ``c + (v - c) * f``."""
    return center + (value - center) * factor


def shear_x(x: float, y: float, tangent: float) -> float:
    """Shear an x coordinate by its own y: ``x + y * tan``."""
    return x + y * tangent


def slant_tangent(degrees: float) -> float:
    """Tangent of a signed slant angle given in degrees."""
    return math.tan(math.radians(degrees))


def snap(value: float, grid_size: float) -> float:
    """Snap a coordinate to the nearest multiple of grid_size.

    Halfway values round away from zero.

    Args:
        value: Coordinate to snap
        grid_size: Grid spacing, must be positive

    Returns:
        Nearest multiple of grid_size

    Raises:
        ValueError: If grid_size is not positive

    Examples:
        >>> snap(25, 50)
        50
        >>> snap(-25, 50)
        -50
        >>> snap(24, 50)
        0
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive, got {grid_size}")

    steps = math.floor(abs(value) / grid_size + 0.5)
    if value < 0:
        steps = -steps
    return steps * grid_size
