"""Tests for weight and style inference."""

import pytest

from fontsplit.core.style import ITALIC, NORMAL, style_of, weight_of


@pytest.mark.parametrize(
    "text, weight",
    [
        ("Thin", 100),
        ("Hairline", 100),
        ("ExtraLight", 200),
        ("UltraLight Italic", 200),
        ("Light", 300),
        ("Regular", 400),
        ("Book", 400),
        ("Medium", 500),
        ("SemiBold", 600),
        ("DemiBold", 600),
        ("Bold", 700),
        ("Bold Italic", 700),
        ("ExtraBold", 800),
        ("UltraBold", 800),
        ("Black", 900),
        ("Heavy", 900),
    ],
)
def test_weight_of(text, weight):
    assert weight_of(text) == weight


@pytest.mark.parametrize("text", ["ExtraBold", "extrabold italic", "EXTRABOLD", "Foo-ExtraBoldOblique"])
def test_extrabold_is_never_bold(text):
    assert weight_of(text) == 800


def test_empty_text_defaults():
    assert weight_of("") == 400
    assert style_of("") == NORMAL


def test_style_of():
    assert style_of("Bold Italic") == ITALIC
    assert style_of("Oblique") == ITALIC
    assert style_of("LightItalic") == ITALIC
    assert style_of("ExtraBold") == NORMAL


def test_bold_italic_scenario():
    assert (weight_of("Bold Italic"), style_of("Bold Italic")) == (700, "italic")


def test_extrabold_scenario():
    assert (weight_of("ExtraBold"), style_of("ExtraBold")) == (800, "normal")
