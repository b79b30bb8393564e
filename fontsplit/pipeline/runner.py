"""
Build pipeline orchestration.

Scans the input directory and, font by font, reads metadata, extracts the
subsets of the selected mode and writes the stylesheets.
"""

from pathlib import Path

from fontsplit.config.paths import MANIFEST_NAME
from fontsplit.config.settings import BuildSettings
from fontsplit.config.unicode_ranges import SubsetBucket, SubsetPlanner
from fontsplit.core.errors import ArtifactWriteError, DirectoryReadError
from fontsplit.core.font_info import resolve_font_info
from fontsplit.core.font_io import FontSourceFile, iter_fonts, to_mb
from fontsplit.operations.css import CSSAggregator, CssBundle, ProcessedFontSummary
from fontsplit.operations.manifest import write_manifest
from fontsplit.operations.subset import subset_font
from fontsplit.utils.logging import logger
from fontsplit.utils.subprocess import locate_metadata_tool, locate_subset_tool


def write_stylesheets(bundle: CssBundle, output_dir: Path) -> list[Path]:
    """
    Write the stylesheets of one font.

    Either all stylesheets are written or none is left behind: when one
    write fails, the ones already written by this call are removed.

    Raises:
        ArtifactWriteError: If a stylesheet cannot be written
    """
    targets = [(output_dir / bundle.local_file_name, bundle.local_css)]
    if bundle.remote_css is not None:
        targets.append((output_dir / bundle.remote_file_name, bundle.remote_css))

    written: list[Path] = []
    for path, text in targets:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            for done in written:
                try:
                    done.unlink(missing_ok=True)
                except OSError as cleanup_error:
                    logger.warning(f"  Could not remove {done}: {cleanup_error}")
            raise ArtifactWriteError(f"Cannot write {path}: {e}") from e
        written.append(path)
    return written


def process_font(
    source: FontSourceFile,
    buckets: list[SubsetBucket],
    settings: BuildSettings,
    aggregator: CSSAggregator,
    subset_tool: list[str],
    metadata_tool: list[str],
    seen_base_names: dict[str, str] | None = None,
) -> ProcessedFontSummary | None:
    """
    Run one font through the pipeline.

    seen_base_names maps artifact base names to the file that first used
    them in this run; a repeat is logged because both fonts then share
    subset files and stylesheets.

    Returns:
        The summary of the font, or None if no subset succeeded or its
        stylesheets could not be written
    """
    info = resolve_font_info(
        source.path, tool=metadata_tool, timeout=settings.metadata_timeout
    )

    base_name = info.artifact_base_name
    if seen_base_names is not None:
        first = seen_base_names.setdefault(base_name, source.name)
        if first != source.name:
            logger.warning(
                f"  {source.name} shares the artifact name {base_name} with {first}"
            )

    if info.success:
        logger.info(f"  Family: {info.family_name}")
        logger.info(f"  Weight: {info.weight}")
        logger.info(f"  Style:  {info.style}")
    else:
        logger.info(f"  Using filename: {info.family_name} ({info.weight}, {info.style})")

    results = subset_font(
        source.path,
        info,
        buckets,
        settings.output_dir,
        subset_tool,
        reuse_existing=settings.reuse_existing,
        timeout=settings.subset_timeout,
    )

    if not any(result.success for result in results):
        logger.error(f"  No subsets succeeded for {info.family_name}")
        return None

    bundle = aggregator.aggregate(info, results, source.size)

    try:
        write_stylesheets(bundle, settings.output_dir)
    except ArtifactWriteError as e:
        logger.error(f"  {e}")
        return None

    summary = bundle.summary
    logger.info(
        f"  {summary.subset_count}/{len(buckets)} subsets, "
        f"{summary.original_size_mb:.2f} MB original, "
        f"{summary.saved_size_mb:.2f} MB saved ({summary.saved_percent:.1f}%)"
    )
    if any(result.cached for result in results):
        logger.debug("  Reused subsets count as 0 bytes; savings are overstated")
    return summary


def run_build(
    settings: BuildSettings,
    planner: SubsetPlanner | None = None,
) -> list[ProcessedFontSummary]:
    """
    Run the whole pipeline.

    Per-bucket and per-font failures are logged and skipped. Only a
    missing fontTools installation or an unreadable input directory stop
    the run.

    Args:
        settings: Run settings
        planner: Mode and priority tables (defaults to the built-in ones)

    Returns:
        Summaries of the fonts that produced stylesheets, in processing order

    Raises:
        ToolUnavailableError: If pyftsubset or ttx cannot be found
        DirectoryReadError: If the input directory cannot be listed
        ArtifactWriteError: If the output directory cannot be created
    """
    planner = planner or SubsetPlanner()

    subset_tool = locate_subset_tool()
    metadata_tool = locate_metadata_tool()

    logger.info(f"Input directory:  {settings.input_dir}")
    logger.info(f"Output directory: {settings.output_dir}")
    logger.info(f"Mode:             {settings.mode}")

    if not settings.input_dir.is_dir():
        raise DirectoryReadError(f"Input directory not found: {settings.input_dir}")

    sources = list(iter_fonts(settings.input_dir))
    if not sources:
        logger.warning(f"No font files found in {settings.input_dir}/")
        return []

    buckets = planner.buckets(settings.mode)
    logger.info(f"Extracting {len(buckets)} subsets per font:")
    for bucket in buckets:
        logger.info(f"  - {bucket.name}")

    try:
        settings.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(f"Cannot create {settings.output_dir}: {e}") from e

    aggregator = CSSAggregator(planner, settings.base_url)
    processed: list[ProcessedFontSummary] = []
    seen_base_names: dict[str, str] = {}

    for i, source in enumerate(sources, 1):
        logger.info(f"[{i}/{len(sources)}] Processing {source.name}")
        summary = process_font(
            source,
            buckets,
            settings,
            aggregator,
            subset_tool,
            metadata_tool,
            seen_base_names,
        )
        if summary is not None:
            processed.append(summary)

    if processed and settings.write_manifest:
        try:
            manifest = write_manifest(
                processed,
                settings.output_dir / MANIFEST_NAME,
                settings.preferred_families,
            )
            logger.info(f"Wrote {manifest}")
        except ArtifactWriteError as e:
            logger.error(str(e))

    original = sum(s.original_size for s in processed)
    saved = sum(s.saved_size for s in processed)
    logger.info(
        f"Processed {len(processed)}/{len(sources)} fonts, "
        f"{to_mb(saved):.2f} of {to_mb(original):.2f} MB saved"
    )
    return processed
