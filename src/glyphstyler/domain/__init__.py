"""Domain models for glyphstyler.

This module contains the path command model shared by every transform and
the point records derived from it. All models are:

- Immutable (frozen dataclasses, outlines are tuples)
- Independent of fonttools implementation details

Key classes:
- MoveTo, LineTo, QuadTo, CubicTo, Close: path command kinds
- Outline: ordered sequence of commands for one glyph
- ControlPoint: an on-curve or off-curve point with its owning field
"""

from glyphstyler.domain.commands import (
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Outline,
    PathCommand,
    QuadTo,
    from_records,
    move_point,
    parse_path_syntax,
    replace_point,
    to_path_syntax,
    to_records,
)
from glyphstyler.domain.points import (
    ControlPoint,
    ControlPoints,
    PointRole,
    extract_control_points,
)

__all__: list[str] = [
    # Commands
    "Close",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "Outline",
    "PathCommand",
    "QuadTo",
    # Points
    "ControlPoint",
    "ControlPoints",
    "PointRole",
    "extract_control_points",
    # Conversions
    "from_records",
    "move_point",
    "parse_path_syntax",
    "replace_point",
    "to_path_syntax",
    "to_records",
]
