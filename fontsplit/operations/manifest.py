"""
Manifest of processed fonts.

Writes fonts.json, the list of fonts that produced stylesheets, for
whatever assembles the preview page.
"""

import json
from collections.abc import Iterable, Sequence
from pathlib import Path

from fontsplit.core.errors import ArtifactWriteError
from fontsplit.operations.css import ProcessedFontSummary


def sort_summaries(
    summaries: Iterable[ProcessedFontSummary],
    preferred_families: Sequence[str] = (),
) -> list[ProcessedFontSummary]:
    """
    Order fonts for display.

    Preferred families come first in the given order, then the rest by
    family name in code point order (no locale collation). Within a
    family, lighter weights come first.
    """
    preferred = {name: index for index, name in enumerate(preferred_families)}
    rest = len(preferred)

    def key(summary: ProcessedFontSummary) -> tuple[int, str, int]:
        family = summary.info.family_name.strip()
        rank = preferred.get(family, rest)
        # Preferred families are ordered by rank alone
        return rank, family if rank == rest else "", summary.info.weight

    return sorted(summaries, key=key)


def summary_to_dict(summary: ProcessedFontSummary) -> dict:
    info = summary.info
    return {
        "family_name": info.family_name,
        "full_name": info.full_name,
        "postscript_name": info.postscript_name,
        "weight": info.weight,
        "style": info.style,
        "metadata_ok": info.success,
        "css_file_name": summary.css_file_name,
        "subsets": summary.subset_count,
        "original_size": summary.original_size,
        "saved_size": summary.saved_size,
        "saved_percent": summary.saved_percent,
    }


def write_manifest(
    summaries: Iterable[ProcessedFontSummary],
    path: Path,
    preferred_families: Sequence[str] = (),
) -> Path:
    """
    Write the sorted summaries as JSON.

    Raises:
        ArtifactWriteError: If the file cannot be written
    """
    fonts = [summary_to_dict(s) for s in sort_summaries(summaries, preferred_families)]
    try:
        path.write_text(
            json.dumps({"fonts": fonts}, ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise ArtifactWriteError(f"Cannot write {path}: {e}") from e
    return path
