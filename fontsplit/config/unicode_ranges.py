"""
Unicode range definitions for web font subsetting.

Each mode maps bucket names to the range list cut into one woff2 file.
Reference: https://www.unicode.org/charts/
Note: pyftsubset accepts the U+XXXX-YYYY form used here.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from fontsplit.utils.logging import logger

DEFAULT_MODE = "standard"


@dataclass(frozen=True)
class SubsetBucket:
    """A named group of code point ranges extracted into one artifact."""

    name: str
    unicode_range: str


MINIMAL = MappingProxyType(
    {
        "latin": "U+0020-007E,U+00A0-00FF",
        "cjk-core": "U+4E00-4FFF",  # Most frequent ideograph block
        "symbols": "U+3000-303F,U+FF00-FF0F",  # Basic CJK punctuation
    }
)

STANDARD = MappingProxyType(
    {
        "latin": "U+0020-007E,U+00A0-00FF,U+0100-017F,U+0180-024F",
        "latin-ext": "U+1E00-1EFF,U+2020,U+20A0-20AB,U+20AD-20CF",
        "cjk-common": "U+4E00-5FFF",  # Common ideographs (~8000)
        "cjk-extended": "U+6000-7FFF,U+8000-9FFF",
        "cjk-symbols": "U+3000-303F,U+FF00-FFEF",  # Punctuation and fullwidth forms
        "numbers": "U+0030-0039,U+FF10-FF19",  # ASCII and fullwidth digits
    }
)

FULL = MappingProxyType(
    {
        "latin": "U+0000-00FF,U+0131,U+0152-0153,U+02BB-02BC,U+02C6,U+02DA,U+02DC",
        "latin-ext": (
            "U+0100-024F,U+0259,U+1E00-1EFF,U+2020,U+20A0-20AB,U+20AD-20CF,"
            "U+2113,U+2C60-2C7F,U+A720-A7FF"
        ),
        "greek": "U+0370-03FF",
        "cyrillic": "U+0400-045F,U+0490-0491,U+04B0-04B1,U+2116",
        # CJK Unified Ideographs, split by block in rough frequency order
        "cjk-basic": "U+4E00-4FFF",
        "cjk-common": "U+5000-5FFF",
        "cjk-extended-1": "U+6000-6FFF",
        "cjk-extended-2": "U+7000-7FFF",
        "cjk-extended-3": "U+8000-8FFF",
        "cjk-extended-4": "U+9000-9FFF",
        "cjk-ext-a": "U+3400-4DBF",  # Extension A
        "cjk-symbols": "U+3000-303F,U+FF00-FFEF,U+2E80-2EFF,U+31C0-31EF",
        # Japanese
        "hiragana": "U+3040-309F",
        "katakana": "U+30A0-30FF",
        # Korean
        "korean": "U+AC00-D7AF,U+1100-11FF,U+3130-318F",
        "symbols": "U+2000-206F,U+2070-209F,U+20A0-20CF,U+2100-214F",
        "numbers": "U+0030-0039,U+FF10-FF19",
    }
)

SUBSET_MODES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {"minimal": MINIMAL, "standard": STANDARD, "full": FULL}
)

# Output order of @font-face blocks, independent of mode
PRIORITY: tuple[str, ...] = (
    "latin",
    "latin-ext",
    "numbers",
    "cjk-core",
    "symbols",
    "cjk-symbols",
    "cjk-basic",
    "cjk-common",
    "cjk-extended",
    "cjk-extended-1",
    "cjk-extended-2",
    "cjk-extended-3",
    "cjk-extended-4",
    "cjk-ext-a",
    "hiragana",
    "katakana",
    "korean",
    "greek",
    "cyrillic",
)


def priority_sorted(names: Iterable[str], priority: Sequence[str] = PRIORITY) -> list[str]:
    """
    Order bucket names by their position in the priority list.

    Names missing from the list go after all listed ones and keep their
    encounter order (sorted() is stable).
    """
    rank = {name: index for index, name in enumerate(priority)}
    unranked = len(rank)
    return sorted(names, key=lambda name: rank.get(name, unranked))


class SubsetPlanner:
    """Resolves a subset mode to the buckets that get extracted."""

    def __init__(
        self,
        modes: Mapping[str, Mapping[str, str]] = SUBSET_MODES,
        priority: Sequence[str] = PRIORITY,
        default_mode: str = DEFAULT_MODE,
    ):
        if default_mode not in modes:
            raise ValueError(f"Default mode '{default_mode}' is not defined")
        self._modes = modes
        self._priority = tuple(priority)
        self._default_mode = default_mode

    @property
    def priority(self) -> tuple[str, ...]:
        return self._priority

    def modes(self) -> list[str]:
        """Names of the known modes."""
        return list(self._modes)

    def resolve_mode(self, mode: str) -> str:
        """Return mode if known, otherwise the default mode."""
        if mode in self._modes:
            return mode
        logger.warning(f"Unknown subset mode '{mode}', using '{self._default_mode}'")
        return self._default_mode

    def plan(self, mode: str) -> dict[str, str]:
        """Bucket name -> Unicode range, in mode definition order."""
        return dict(self._modes[self.resolve_mode(mode)])

    def buckets(self, mode: str) -> list[SubsetBucket]:
        """The buckets of a mode, in mode definition order."""
        return [SubsetBucket(name, ranges) for name, ranges in self.plan(mode).items()]

    def order(self, names: Iterable[str]) -> list[str]:
        """Sort bucket names for output."""
        return priority_sorted(names, self._priority)
