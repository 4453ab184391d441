"""Control point extraction for display and editing.

Point records are derived on demand from an outline and never written back
through this module. An editor locates the originating field through
``command_index`` and ``key`` and builds a new outline with
:func:`glyphstyler.domain.commands.replace_point`.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from glyphstyler.domain.commands import MoveTo, Outline, iter_points


class PointRole(Enum):
    """Role of a point on the outline.

    - ANCHOR: on-curve point the outline passes through
    - CONTROL: off-curve Bezier handle
    """

    ANCHOR = "anchor"
    CONTROL = "control"


@dataclass(frozen=True, slots=True)
class ControlPoint:
    """A point of an outline with a back-reference to its command field.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        on_curve: True for anchors, False for control handles
        command_index: Index of the owning command in the outline
        key: Field pair of the owning command ("main", "c1" or "c2")
        last_of_contour: True for the final anchor of a subpath
    """

    x: float
    y: float
    on_curve: bool
    command_index: int
    key: str
    last_of_contour: bool = False

    @property
    def role(self) -> PointRole:
        return PointRole.ANCHOR if self.on_curve else PointRole.CONTROL

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


class ControlPoints:
    """Lazy, restartable sequence of the control points of an outline.

    Every call to ``iter()`` starts a fresh pass over the outline, so the
    same object can be iterated any number of times.
    """

    def __init__(self, outline: Outline) -> None:
        self._outline = outline

    def __iter__(self) -> Iterator[ControlPoint]:
        last_anchor = self._last_anchor_indices()
        for index, cmd in enumerate(self._outline):
            for key, x, y in iter_points(cmd):
                on_curve = key == "main"
                yield ControlPoint(
                    x=x,
                    y=y,
                    on_curve=on_curve,
                    command_index=index,
                    key=key,
                    last_of_contour=on_curve and index in last_anchor,
                )

    def _last_anchor_indices(self) -> set[int]:
        """Indices of the last point-bearing command of each subpath."""
        result: set[int] = set()
        candidate: int | None = None
        for index, cmd in enumerate(self._outline):
            if isinstance(cmd, MoveTo) and candidate is not None:
                result.add(candidate)
                candidate = None
            if cmd.point_keys:
                candidate = index
        if candidate is not None:
            result.add(candidate)
        return result


def extract_control_points(outline: Outline) -> ControlPoints:
    """Derive control point records from an outline.

    MoveTo/LineTo give one anchor, QuadTo gives a control then an anchor,
    CubicTo gives two controls then an anchor, Close gives nothing.
    """
    return ControlPoints(outline)
