"""
Weight and style inference from subfamily names and filenames.
"""

from collections.abc import Callable

NORMAL = "normal"
ITALIC = "italic"
DEFAULT_WEIGHT = 400


def _any_of(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(keyword in text for keyword in keywords)


# Evaluated top to bottom, first match wins. "light" comes after
# "extralight" and "bold" must not claim "extrabold".
WEIGHT_RULES: tuple[tuple[Callable[[str], bool], int], ...] = (
    (_any_of("thin", "hairline"), 100),
    (_any_of("extralight", "ultralight"), 200),
    (_any_of("light"), 300),
    (_any_of("medium"), 500),
    (_any_of("semibold", "demibold"), 600),
    (lambda text: "bold" in text and "extrabold" not in text, 700),
    (_any_of("extrabold", "ultrabold"), 800),
    (_any_of("black", "heavy"), 900),
)

ITALIC_KEYWORDS = ("italic", "oblique")


def weight_of(text: str) -> int:
    """Numeric weight (100-900) named in a subfamily or filename."""
    lower = text.lower()
    for matches, weight in WEIGHT_RULES:
        if matches(lower):
            return weight
    return DEFAULT_WEIGHT


def style_of(text: str) -> str:
    """CSS font-style named in a subfamily or filename."""
    lower = text.lower()
    return ITALIC if any(keyword in lower for keyword in ITALIC_KEYWORDS) else NORMAL
