"""
Stylesheet generation.

Turns the subset results of a font into @font-face declarations, ordered
by bucket priority, and computes how much the subsets save.

Subset files that were reused from a previous run report a size of 0, so
subset_size, saved_size and saved_percent are only accurate on a clean run
(or with reuse_existing disabled).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from fontsplit.config.paths import SUBSET_FLAVOR
from fontsplit.config.unicode_ranges import SubsetPlanner
from fontsplit.core.font_info import FontInfo
from fontsplit.core.font_io import to_mb
from fontsplit.core.naming import css_file_names, subset_file_name
from fontsplit.operations.subset import SubsetResult

FONT_FACE_TEMPLATE = """\
@font-face {{
  font-family: '{family}';
  font-style: {style};
  font-weight: {weight};
  font-display: swap;
  src: url('{url}') format('{format}');
  unicode-range: {unicode_range};
}}

"""

HEADER_TEMPLATE = """\
/*
 * {family} subsets
 * Font: {full_name} (Weight: {weight}, Style: {style})
 * Subsets: {count}
 */

"""


@dataclass(frozen=True)
class ProcessedFontSummary:
    """A font that produced at least one subset."""

    info: FontInfo
    css_file_name: str
    subset_count: int
    original_size: int
    subset_size: int

    @property
    def saved_size(self) -> int:
        return self.original_size - self.subset_size

    @property
    def saved_percent(self) -> float:
        if self.original_size <= 0:
            return 0.0
        return round(self.saved_size / self.original_size * 100, 1)

    @property
    def original_size_mb(self) -> float:
        return round(to_mb(self.original_size), 2)

    @property
    def saved_size_mb(self) -> float:
        return round(to_mb(self.saved_size), 2)


@dataclass(frozen=True)
class CssBundle:
    """Stylesheets and metrics for one font."""

    local_css: str
    remote_css: str | None
    summary: ProcessedFontSummary

    @property
    def local_file_name(self) -> str:
        return css_file_names(self.summary.css_file_name)[0]

    @property
    def remote_file_name(self) -> str:
        return css_file_names(self.summary.css_file_name)[1]


def css_string(text: str) -> str:
    """Escape text for use inside a single-quoted CSS string."""
    return text.replace("\\", "\\\\").replace("'", "\\'")


def render_font_face(
    info: FontInfo, result: SubsetResult, url: str, font_format: str = SUBSET_FLAVOR
) -> str:
    """One @font-face block."""
    return FONT_FACE_TEMPLATE.format(
        family=css_string(info.family_name),
        style=info.style,
        weight=info.weight,
        url=url,
        format=font_format,
        unicode_range=result.unicode_range,
    )


class CSSAggregator:
    """Builds the stylesheets of a font from its subset results."""

    def __init__(self, planner: SubsetPlanner | None = None, base_url: str | None = None):
        self.planner = planner or SubsetPlanner()
        if base_url and not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url or None

    def order(self, results: Iterable[SubsetResult]) -> list[SubsetResult]:
        """Successful results in priority order."""
        by_name = {}
        for result in results:
            if result.success:
                by_name[result.name] = result
        return [by_name[name] for name in self.planner.order(by_name)]

    def aggregate(
        self,
        info: FontInfo,
        results: Iterable[SubsetResult],
        original_size: int,
    ) -> CssBundle:
        """
        Render the stylesheets of a font.

        Args:
            info: Metadata of the source font
            results: Subset results in any order; failures are ignored
            original_size: Size of the source font in bytes

        Returns:
            CssBundle with the relative-URL stylesheet, the base-URL
            stylesheet (None without base_url) and the summary
        """
        ordered = self.order(results)
        base_name = info.artifact_base_name

        header = HEADER_TEMPLATE.format(
            family=info.family_name,
            full_name=info.full_name,
            weight=info.weight,
            style=info.style,
            count=len(ordered),
        )
        local_parts = [header]
        remote_parts = [header]

        for result in ordered:
            file_name = subset_file_name(base_name, result.name)
            local_parts.append(render_font_face(info, result, f"./{file_name}"))
            if self.base_url is not None:
                remote_parts.append(
                    render_font_face(info, result, f"{self.base_url}{file_name}")
                )

        summary = ProcessedFontSummary(
            info=info,
            css_file_name=base_name,
            subset_count=len(ordered),
            original_size=original_size,
            subset_size=sum(result.size for result in ordered),
        )
        return CssBundle(
            local_css="".join(local_parts),
            remote_css="".join(remote_parts) if self.base_url is not None else None,
            summary=summary,
        )
