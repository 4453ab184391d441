"""Shared fixtures: small fonts built with fontTools FontBuilder."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPM = 1000
ADVANCE = 600
GLYPH_ORDER = [".notdef", "space", "square", "curve", "comp"]
CMAP = {ord(" "): "space", ord("S"): "square", ord("O"): "curve", ord("C"): "comp"}
NAME_STRINGS = {
    "familyName": "Test Sans",
    "styleName": "Regular",
    "uniqueFontIdentifier": "TestSans-Regular;1.000",
    "fullName": "Test Sans Regular",
    "psName": "TestSans-Regular",
    "version": "Version 1.000",
    "designer": "Type Tester",
}


def draw_square(pen) -> None:
    pen.moveTo((100, 0))
    pen.lineTo((500, 0))
    pen.lineTo((500, 500))
    pen.lineTo((100, 500))
    pen.closePath()


def draw_quadratic_ring(pen) -> None:
    pen.moveTo((100, 250))
    pen.qCurveTo((100, 500), (300, 500))
    pen.qCurveTo((500, 500), (500, 250))
    pen.qCurveTo((500, 0), (300, 0))
    pen.qCurveTo((100, 0), (100, 250))
    pen.closePath()


def draw_cubic_ring(pen) -> None:
    pen.moveTo((100, 250))
    pen.curveTo((100, 400), (200, 500), (300, 500))
    pen.curveTo((400, 500), (500, 400), (500, 250))
    pen.curveTo((500, 100), (400, 0), (300, 0))
    pen.curveTo((200, 0), (100, 100), (100, 250))
    pen.closePath()


def _finish(fb: FontBuilder, metrics: dict[str, tuple[int, int]]) -> None:
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(NAME_STRINGS)
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.setupMaxp()


def build_truetype_font(path: Path, flavor: str | None = None) -> Path:
    """Build a TrueType font with empty, line, curve and composite glyphs."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)

    glyphs = {}
    glyphs[".notdef"] = TTGlyphPen(None).glyph()
    glyphs["space"] = TTGlyphPen(None).glyph()

    pen = TTGlyphPen(None)
    draw_square(pen)
    glyphs["square"] = pen.glyph()

    pen = TTGlyphPen(None)
    draw_quadratic_ring(pen)
    glyphs["curve"] = pen.glyph()

    pen = TTGlyphPen(glyphs)
    pen.addComponent("square", (1, 0, 0, 1, 0, 100))
    glyphs["comp"] = pen.glyph()

    fb.setupGlyf(glyphs)
    _finish(
        fb,
        {
            ".notdef": (ADVANCE, 0),
            "space": (ADVANCE, 0),
            "square": (ADVANCE, 100),
            "curve": (ADVANCE, 100),
            "comp": (ADVANCE, 100),
        },
    )

    if flavor is not None:
        fb.font.flavor = flavor
    fb.save(str(path))
    return path


def build_cff_font(path: Path) -> Path:
    """Build a CFF-flavored OpenType font with cubic outlines."""
    fb = FontBuilder(UPM, isTTF=False)
    order = [".notdef", "space", "square", "curve"]
    fb.setupGlyphOrder(order)
    fb.setupCharacterMap({ord(" "): "space", ord("S"): "square", ord("O"): "curve"})

    charstrings = {}
    for name in order:
        pen = T2CharStringPen(ADVANCE, None)
        if name == "square":
            draw_square(pen)
        elif name == "curve":
            draw_cubic_ring(pen)
        charstrings[name] = pen.getCharString()

    fb.setupCFF("TestSans-Regular", {"FullName": "Test Sans Regular"}, charstrings, {})
    _finish(
        fb,
        {
            ".notdef": (ADVANCE, 0),
            "space": (ADVANCE, 0),
            "square": (ADVANCE, 100),
            "curve": (ADVANCE, 100),
        },
    )
    fb.save(str(path))
    return path


@pytest.fixture
def truetype_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built TrueType test font."""
    return build_truetype_font(tmp_path / "TestSans-Regular.ttf")


@pytest.fixture
def cff_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built CFF test font."""
    return build_cff_font(tmp_path / "TestSans-Regular.otf")


@pytest.fixture
def woff_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built WOFF test font."""
    return build_truetype_font(tmp_path / "TestSans-Regular.woff", flavor="woff")
