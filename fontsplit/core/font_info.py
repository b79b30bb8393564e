"""
Font metadata resolution.

Reads the name table through ttx and falls back to the filename when that
fails, so every font gets a complete FontInfo.
"""

import tempfile
from dataclasses import dataclass
from pathlib import Path

from fontsplit.core.errors import MetadataExtractionError, ToolUnavailableError
from fontsplit.core.name_table import is_well_formed, parse_name_table
from fontsplit.core.naming import infer_from_filename, safe_file_stem
from fontsplit.core.style import DEFAULT_WEIGHT, NORMAL, style_of, weight_of
from fontsplit.utils.logging import logger
from fontsplit.utils.subprocess import locate_metadata_tool, run_ttx_name_table


@dataclass(frozen=True)
class FontInfo:
    """Identification of one source font."""

    family_name: str
    weight: int = DEFAULT_WEIGHT
    style: str = NORMAL
    full_name: str = ""
    postscript_name: str = ""
    success: bool = True
    error: str | None = None

    @property
    def artifact_base_name(self) -> str:
        """Base name shared by the subset files and stylesheets of this font."""
        return safe_file_stem(self.postscript_name or self.family_name)


def extract_name_table(
    font_path: Path,
    tool: list[str] | None = None,
    timeout: float | None = None,
) -> str:
    """
    Dump the name table of a font as ttx XML text.

    Raises:
        MetadataExtractionError: If ttx is missing, fails, or writes
            something that is not XML
    """
    if not font_path.is_file():
        raise MetadataExtractionError(f"Not a file: {font_path}")

    if tool is None:
        try:
            tool = locate_metadata_tool()
        except ToolUnavailableError as e:
            raise MetadataExtractionError(str(e)) from e

    try:
        with tempfile.TemporaryDirectory(prefix="fontsplit-") as tmp:
            dump = Path(tmp) / "name.ttx"
            run_ttx_name_table(tool, font_path, dump, timeout=timeout)
            text = dump.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataExtractionError(f"Could not read ttx output: {e}") from e

    if not is_well_formed(text):
        raise MetadataExtractionError("ttx output is not valid XML")
    return text


def resolve_font_info(
    font_path: Path,
    *,
    tool: list[str] | None = None,
    timeout: float | None = None,
) -> FontInfo:
    """
    Build the FontInfo of a font. Never raises.

    Fields missing from the name table fall back one by one (family to the
    filename stem, weight to 400, style to normal, full and PostScript name
    to the family). If the name table cannot be read at all, the whole
    record comes from the filename and success is False.
    """
    stem = font_path.stem

    try:
        table = parse_name_table(extract_name_table(font_path, tool, timeout))
    except MetadataExtractionError as e:
        logger.warning(f"Could not read font metadata of {font_path.name}: {e}")
        guess = infer_from_filename(stem)
        return FontInfo(
            family_name=guess.family_name,
            weight=guess.weight,
            style=guess.style,
            full_name=stem,
            postscript_name=stem,
            success=False,
            error=str(e),
        )

    family = table.family_name or stem
    subfamily = table.subfamily or ""
    return FontInfo(
        family_name=family,
        weight=weight_of(subfamily),
        style=style_of(subfamily),
        full_name=table.full_name or family,
        postscript_name=table.postscript_name or family,
    )
