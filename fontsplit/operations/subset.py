"""
Font subsetting operations.

Cuts one woff2 file per Unicode range bucket with pyftsubset.
"""

from dataclasses import dataclass
from pathlib import Path

from fontsplit.config.paths import SUBSET_FLAVOR, SUBSET_TIMEOUT
from fontsplit.config.unicode_ranges import SubsetBucket
from fontsplit.core.errors import SubsetExtractionError
from fontsplit.core.font_info import FontInfo
from fontsplit.core.naming import subset_file_name
from fontsplit.utils.logging import logger
from fontsplit.utils.subprocess import run_pyftsubset


@dataclass(frozen=True)
class SubsetResult:
    """Outcome of extracting one bucket from one font."""

    name: str
    unicode_range: str
    size: int = 0
    success: bool = False
    cached: bool = False


def extract_subset(
    font_path: Path,
    output_path: Path,
    bucket: SubsetBucket,
    tool: list[str],
    *,
    reuse_existing: bool = True,
    timeout: float | None = SUBSET_TIMEOUT,
) -> SubsetResult:
    """
    Extract one bucket of a font into output_path.

    When reuse_existing is set and output_path already exists, the file is
    trusted as is: the result is a success of size 0 and pyftsubset is not
    run. Failures are logged and returned, never raised.

    Args:
        font_path: Source font
        output_path: Target woff2 file
        bucket: Bucket to extract
        tool: Command prefix from locate_subset_tool
        reuse_existing: Skip extraction when the target exists
        timeout: Seconds before pyftsubset is killed

    Returns:
        SubsetResult for the bucket
    """
    logger.info(f"  Subset {bucket.name}")

    if reuse_existing and output_path.exists():
        logger.debug(f"  {output_path.name} exists, skipped")
        return SubsetResult(bucket.name, bucket.unicode_range, 0, True, cached=True)

    try:
        run_pyftsubset(
            tool,
            font_path,
            output_path,
            bucket.unicode_range,
            flavor=SUBSET_FLAVOR,
            timeout=timeout,
        )
        if not output_path.is_file():
            raise SubsetExtractionError(f"pyftsubset did not create {output_path.name}")
        size = output_path.stat().st_size
    except (SubsetExtractionError, OSError) as e:
        message = str(e).splitlines()[0] if str(e) else type(e).__name__
        logger.warning(f"  {bucket.name} failed: {message}")
        return SubsetResult(bucket.name, bucket.unicode_range)

    return SubsetResult(bucket.name, bucket.unicode_range, size, True)


def subset_font(
    font_path: Path,
    info: FontInfo,
    buckets: list[SubsetBucket],
    output_dir: Path,
    tool: list[str],
    *,
    reuse_existing: bool = True,
    timeout: float | None = SUBSET_TIMEOUT,
) -> list[SubsetResult]:
    """
    Extract every bucket of a font, one after another in bucket order.

    Returns:
        One SubsetResult per bucket, in the same order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    base_name = info.artifact_base_name

    return [
        extract_subset(
            font_path,
            output_dir / subset_file_name(base_name, bucket.name),
            bucket,
            tool,
            reuse_existing=reuse_existing,
            timeout=timeout,
        )
        for bucket in buckets
    ]
