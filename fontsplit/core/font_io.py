"""
Font file discovery and size helpers.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from fontsplit.config.paths import FONT_EXTENSIONS
from fontsplit.core.errors import DirectoryReadError


@dataclass(frozen=True)
class FontSourceFile:
    """A font found in the input directory."""

    path: Path
    extension: str
    size: int

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem


def iter_fonts(
    directory: Path,
    extensions: Sequence[str] = FONT_EXTENSIONS,
) -> Iterator[FontSourceFile]:
    """
    Iterate over the font files directly inside a directory, sorted by name.

    Subdirectories are not descended into. Extensions are compared
    case-insensitively.

    Args:
        directory: Directory to scan
        extensions: Accepted file extensions, with leading dot

    Yields:
        FontSourceFile for every matching file

    Raises:
        DirectoryReadError: If the directory cannot be listed
    """
    allowed = {ext.lower() for ext in extensions}

    fonts = []
    try:
        for entry in sorted(directory.iterdir()):
            extension = entry.suffix.lower()
            if extension not in allowed or not entry.is_file():
                continue
            fonts.append(FontSourceFile(entry, extension, entry.stat().st_size))
    except OSError as e:
        raise DirectoryReadError(f"Cannot read input directory {directory}: {e}") from e
    return iter(fonts)


def to_mb(size: int) -> float:
    """Convert a byte count to megabytes."""
    return size / 1024 / 1024
