"""
Run settings for a subsetting pass.
"""

from dataclasses import dataclass, field
from pathlib import Path

from fontsplit.config.paths import (
    INPUT_DIR,
    METADATA_TIMEOUT,
    OUTPUT_DIR,
    SUBSET_TIMEOUT,
)
from fontsplit.config.unicode_ranges import DEFAULT_MODE


@dataclass(frozen=True)
class BuildSettings:
    """Settings for one run of the pipeline."""

    input_dir: Path = INPUT_DIR
    output_dir: Path = OUTPUT_DIR
    mode: str = DEFAULT_MODE
    base_url: str | None = None  # e.g. "https://cdn.example.com/fonts/"
    # Trust subset files that already exist instead of re-extracting them
    reuse_existing: bool = True
    subset_timeout: float = SUBSET_TIMEOUT
    metadata_timeout: float = METADATA_TIMEOUT
    write_manifest: bool = True
    preferred_families: tuple[str, ...] = field(default_factory=tuple)
