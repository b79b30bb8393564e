"""Tests for naming utilities."""

from fontsplit.core.font_info import FontInfo
from fontsplit.core.naming import (
    css_file_names,
    infer_from_filename,
    safe_file_stem,
    subset_file_name,
)


def test_infer_from_filename_semibold():
    """Test the suffix is stripped but still drives the weight."""
    naming = infer_from_filename("NotoSans-SemiBold")
    assert naming.family_name == "NotoSans"
    assert naming.weight == 600
    assert naming.style == "normal"


def test_infer_from_filename_multiple_tokens():
    naming = infer_from_filename("SourceHanSerif-Bold-Italic")
    assert naming.family_name == "SourceHanSerif"
    assert naming.weight == 700
    assert naming.style == "italic"


def test_infer_from_filename_is_case_insensitive():
    naming = infer_from_filename("inter-extrabold")
    assert naming.family_name == "inter"
    assert naming.weight == 800


def test_infer_from_filename_strips_extension():
    assert infer_from_filename("Roboto.woff2").family_name == "Roboto"
    assert infer_from_filename("Roboto-Light.TTF").family_name == "Roboto"


def test_infer_from_filename_without_tokens():
    naming = infer_from_filename("MyFont")
    assert naming.family_name == "MyFont"
    assert naming.weight == 400
    assert naming.style == "normal"


def test_infer_from_filename_never_empty():
    assert infer_from_filename("-Bold").family_name == "-Bold"


def test_safe_file_stem():
    assert safe_file_stem("Source Han Sans") == "SourceHanSans"
    assert safe_file_stem("../evil/name") == "..evilname"


def test_artifact_file_names():
    assert subset_file_name("NotoSans-Bold", "latin") == "NotoSans-Bold-latin.woff2"
    assert css_file_names("NotoSans-Bold") == ("NotoSans-Bold.css", "NotoSans-Bold@css.css")


def test_artifact_base_name_prefers_postscript_name():
    info = FontInfo("Noto Sans", postscript_name="NotoSans-Bold")
    assert info.artifact_base_name == "NotoSans-Bold"
    assert FontInfo("Noto Sans").artifact_base_name == "NotoSans"
