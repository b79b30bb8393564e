"""
Font naming utilities.

Filename-based fallback naming and artifact file names.
"""

import re
from dataclasses import dataclass

from fontsplit.config.paths import CSS_SUFFIX, REMOTE_CSS_SUFFIX, SUBSET_SUFFIX
from fontsplit.core.style import style_of, weight_of

# Hyphen-led style tokens removed from a filename to recover the family
STYLE_SUFFIX_TOKENS = (
    "Regular",
    "Bold",
    "Light",
    "Medium",
    "Thin",
    "Black",
    "Heavy",
    "ExtraBold",
    "SemiBold",
    "Italic",
    "Oblique",
)

_STYLE_SUFFIX_RE = re.compile(
    "-(" + "|".join(STYLE_SUFFIX_TOKENS) + ")", re.IGNORECASE
)
_FONT_EXTENSION_RE = re.compile(r"\.(woff2?|ttf|otf)$", re.IGNORECASE)
_UNSAFE_NAME_RE = re.compile(r"[\s/\\]+")


@dataclass(frozen=True)
class FilenameNaming:
    """Family, weight and style guessed from a filename."""

    family_name: str
    weight: int
    style: str


def infer_from_filename(file_name: str) -> FilenameNaming:
    """
    Guess naming from a filename stem such as "NotoSans-SemiBold".

    Weight and style are read from the untouched name so that the stripped
    tokens still count.
    """
    family = _STYLE_SUFFIX_RE.sub("", file_name)
    family = _FONT_EXTENSION_RE.sub("", family)
    return FilenameNaming(
        family_name=family or file_name,
        weight=weight_of(file_name),
        style=style_of(file_name),
    )


def safe_file_stem(name: str) -> str:
    """Strip whitespace and path separators from an artifact base name."""
    return _UNSAFE_NAME_RE.sub("", name)


def subset_file_name(base_name: str, bucket_name: str) -> str:
    """File name of one subset artifact."""
    return f"{base_name}-{bucket_name}{SUBSET_SUFFIX}"


def css_file_names(base_name: str) -> tuple[str, str]:
    """File names of the relative-URL and absolute-URL stylesheets."""
    return f"{base_name}{CSS_SUFFIX}", f"{base_name}{REMOTE_CSS_SUFFIX}"
