"""Converters between fonttools pens and the path command model.

Decoding records pen calls into commands one for one; encoding replays the
commands onto any fonttools pen in order.
"""

import copy
from typing import Any

from fontTools.misc.roundTools import otRound
from fontTools.pens.basePen import BasePen
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from glyphstyler.domain import Close, CubicTo, LineTo, MoveTo, Outline, PathCommand, QuadTo

# Maximum cubic-to-quadratic approximation error, in font units
CU2QU_MAX_ERR = 1.0


class OutlinePen(BasePen):
    """Pen recording drawing calls as path commands.

    BasePen splits TrueType ``qCurveTo`` runs with several off-curve points
    into single-control segments at the implied on-curve points, so every
    recorded QuadTo has exactly one control. Open contours (``endPath``)
    record no Close.

    Example:
        pen = OutlinePen(font.getGlyphSet())
        font.getGlyphSet()["A"].draw(pen)
        outline = pen.outline
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self._commands: list[PathCommand] = []

    @property
    def outline(self) -> Outline:
        return tuple(self._commands)

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._commands.append(MoveTo(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self._commands.append(LineTo(*pt))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self._commands.append(QuadTo(pt1[0], pt1[1], pt2[0], pt2[1]))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self._commands.append(CubicTo(pt1[0], pt1[1], pt2[0], pt2[1], pt3[0], pt3[1]))

    def _closePath(self) -> None:
        self._commands.append(Close())

    def _endPath(self) -> None:
        pass


def draw_outline(outline: Outline, pen: Any) -> None:
    """Replay an outline onto a fonttools pen.

    Subpaths ending in Close are closed with ``closePath``; subpaths left
    open end with ``endPath``.

    Args:
        outline: Outline to draw
        pen: Any object implementing the fonttools pen protocol
    """
    open_subpath = False

    for cmd in outline:
        if isinstance(cmd, MoveTo):
            if open_subpath:
                pen.endPath()
            pen.moveTo((cmd.x, cmd.y))
            open_subpath = True
        elif isinstance(cmd, LineTo):
            pen.lineTo((cmd.x, cmd.y))
        elif isinstance(cmd, QuadTo):
            pen.qCurveTo((cmd.x1, cmd.y1), (cmd.x, cmd.y))
        elif isinstance(cmd, CubicTo):
            pen.curveTo((cmd.x1, cmd.y1), (cmd.x2, cmd.y2), (cmd.x, cmd.y))
        elif isinstance(cmd, Close):
            if open_subpath:
                pen.closePath()
            open_subpath = False

    if open_subpath:
        pen.endPath()


class GlyfSnapshot:
    """Read-only glyph set over a frozen copy of a glyf table.

    Composite glyphs decoded through it resolve their components to the
    outlines the font had when the snapshot was taken, whatever has been
    written to the live table since.
    """

    def __init__(self, glyf_table: Any) -> None:
        self._glyf = copy.deepcopy(glyf_table)

    def __contains__(self, glyph_name: str) -> bool:
        return glyph_name in self._glyf

    def __getitem__(self, glyph_name: str) -> "_SnapshotGlyph":
        if glyph_name not in self._glyf:
            raise KeyError(glyph_name)
        return _SnapshotGlyph(self._glyf, glyph_name)


class _SnapshotGlyph:
    def __init__(self, glyf_table: Any, glyph_name: str) -> None:
        self._glyf = glyf_table
        self._name = glyph_name

    def draw(self, pen: Any) -> None:
        self._glyf[self._name].draw(pen, self._glyf)


def decode_glyph(glyph_set: Any, glyph_name: str) -> Outline:
    """Decode one glyph of a fonttools glyph set into an outline."""
    pen = OutlinePen(glyph_set)
    glyph_set[glyph_name].draw(pen)
    return pen.outline


def is_composite(font: TTFont, glyph_name: str) -> bool:
    """Check if a glyph is built from component references."""
    if "glyf" not in font:
        return False
    return font["glyf"][glyph_name].isComposite()  # type: ignore[attr-defined]


def encode_glyph(font: TTFont, glyph_name: str, outline: Outline) -> bool:
    """Write an outline into a font's outline table.

    Handles both TrueType (quadratic, via Cu2QuPen) and CFF (cubic) fonts.
    For TrueType the glyph bounds and left side bearing are refreshed.

    Args:
        font: The TTFont object to modify
        glyph_name: Name of the glyph to replace
        outline: New outline

    Returns:
        False if the font has no writable outline table, True otherwise
    """
    if "glyf" in font:
        _update_truetype_glyph(font, glyph_name, outline)
        return True
    if "CFF " in font:
        _update_cff_glyph(font, glyph_name, outline)
        return True
    return False


def _update_truetype_glyph(font: TTFont, glyph_name: str, outline: Outline) -> None:
    glyf_table = font["glyf"]

    tt_pen = TTGlyphPen(None)
    draw_outline(outline, Cu2QuPen(tt_pen, CU2QU_MAX_ERR, reverse_direction=False))

    new_glyph = tt_pen.glyph()
    new_glyph.recalcBounds(glyf_table)
    glyf_table[glyph_name] = new_glyph

    if "hmtx" in font:
        hmtx = font["hmtx"]
        advance_width, _ = hmtx[glyph_name]
        hmtx[glyph_name] = (advance_width, getattr(new_glyph, "xMin", 0))


def _update_cff_glyph(font: TTFont, glyph_name: str, outline: Outline) -> None:
    cff_table = font["CFF "]
    top_dict = cff_table.cff.topDictIndex[0]  # type: ignore[union-attr]
    charstrings = top_dict.CharStrings
    global_subrs = cff_table.cff.GlobalSubrs  # type: ignore[union-attr]

    # CID-keyed fonts keep Private dicts per FD
    original = charstrings[glyph_name]
    private = original.private

    advance_width = font["hmtx"][glyph_name][0] if "hmtx" in font else 0
    default_width = getattr(private, "defaultWidthX", 0)
    nominal_width = getattr(private, "nominalWidthX", 0)
    width = None if advance_width == default_width else advance_width - nominal_width

    pen = T2CharStringPen(width=width, glyphSet=None)
    draw_outline(outline, pen)

    charstring = pen.getCharString(private=private, globalSubrs=global_subrs)
    charstrings[glyph_name] = charstring

    if "hmtx" in font:
        bounds = charstring.calcBounds(None)
        lsb = otRound(bounds[0]) if bounds else 0
        font["hmtx"][glyph_name] = (advance_width, lsb)
