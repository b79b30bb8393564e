"""Shared pytest fixtures."""

import sys
import textwrap
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen


@pytest.fixture
def temp_font_dir(tmp_path):
    """Create a temporary directory for font testing."""
    path = tmp_path / "fonts"
    path.mkdir()
    return path


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path, family: str = "Test Sans", style: str = "Regular") -> Path:
    """Write a tiny TrueType font covering a few Latin and CJK code points."""
    cmap = {0x20: "space", 0x41: "A", 0x61: "a", 0x3001: "uni3001", 0x4E00: "uni4E00"}
    glyph_order = [".notdef", *cmap.values()]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    glyphs = {name: _box_glyph() for name in glyph_order}
    glyphs["space"] = TTGlyphPen(None).glyph()
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({name: (600, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    ps_name = f"{family.replace(' ', '')}-{style.replace(' ', '')}"
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style,
            "uniqueFontIdentifier": f"fontsplit-test:{ps_name}",
            "fullName": f"{family} {style}",
            "psName": ps_name,
            "version": "Version 1.000",
        }
    )
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def make_font():
    """Factory writing test fonts: make_font(path, family, style)."""
    return build_test_font


FAKE_SUBSETTER = textwrap.dedent(
    """
    import sys
    import time

    args = sys.argv[1:]
    options = dict(a[2:].split("=", 1) for a in args if a.startswith("--") and "=" in a)
    if "FAIL" in options.get("unicodes", ""):
        sys.stderr.write("fake failure\\nsecond line\\n")
        sys.exit(2)
    if "GARBLED" in options.get("unicodes", ""):
        sys.stderr.buffer.write(b"\\xff\\xfe warning about \\xe6\\n")
        sys.exit(1)
    if "SLOW" in options.get("unicodes", ""):
        time.sleep(10)
    with open(options["output-file"], "wb") as f:
        f.write(b"x" * 1000)
    """
)


@pytest.fixture
def fake_subset_tool(tmp_path):
    """
    Command prefix of a stand-in for pyftsubset.

    It writes 1000 bytes to --output-file, fails when the ranges contain
    "FAIL", fails with undecodable stderr on "GARBLED" and sleeps when
    they contain "SLOW".
    """
    script = tmp_path / "fake_pyftsubset.py"
    script.write_text(FAKE_SUBSETTER)
    return [sys.executable, str(script)]
