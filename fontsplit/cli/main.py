"""
Main CLI entry point for fontsplit.
"""

import sys
from pathlib import Path

import click

from fontsplit import __version__
from fontsplit.config.paths import INPUT_DIR, OUTPUT_DIR, SUBSET_TIMEOUT
from fontsplit.config.unicode_ranges import DEFAULT_MODE, SUBSET_MODES


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
def cli():
    """Split fonts into web font subsets with matching CSS."""
    pass


@cli.command()
@click.option(
    "--input",
    "input_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=INPUT_DIR,
    show_default=True,
    envvar="FONTSPLIT_INPUT",
    help="Directory containing .ttf, .otf and .woff2 fonts.",
)
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=OUTPUT_DIR,
    show_default=True,
    envvar="FONTSPLIT_OUTPUT",
    help="Directory for subsets and stylesheets.",
)
@click.option(
    "--mode",
    type=click.Choice(list(SUBSET_MODES)),
    default=DEFAULT_MODE,
    show_default=True,
    envvar="FONTSPLIT_MODE",
    help="Set of Unicode range buckets to extract.",
)
@click.option(
    "--base-url",
    type=str,
    default=None,
    envvar="FONTSPLIT_BASE_URL",
    help="Also write <name>@css.css with subset URLs under this base URL.",
)
@click.option(
    "--force",
    is_flag=True,
    help="Re-extract subsets even if their files already exist.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=SUBSET_TIMEOUT,
    show_default=True,
    help="Seconds allowed for each pyftsubset run.",
)
@click.option(
    "--prefer",
    "preferred_families",
    multiple=True,
    help="Family listed first in the manifest (repeatable).",
)
@click.option("--no-manifest", is_flag=True, help="Do not write fonts.json.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
def build(
    input_dir,
    output_dir,
    mode,
    base_url,
    force,
    timeout,
    preferred_families,
    no_manifest,
    verbose,
):
    """Subset every font in the input directory."""
    from fontsplit.config.settings import BuildSettings
    from fontsplit.core.errors import FontSplitError, ToolUnavailableError
    from fontsplit.pipeline.runner import run_build
    from fontsplit.utils.logging import logger, set_verbose

    set_verbose(verbose)
    settings = BuildSettings(
        input_dir=input_dir,
        output_dir=output_dir,
        mode=mode,
        base_url=base_url,
        reuse_existing=not force,
        subset_timeout=timeout,
        write_manifest=not no_manifest,
        preferred_families=tuple(preferred_families),
    )

    try:
        run_build(settings)
    except ToolUnavailableError as e:
        logger.error(str(e))
        logger.error(f"  Install it with: {e.hint}")
        sys.exit(1)
    except FontSplitError as e:
        logger.error(str(e))
        sys.exit(1)


@cli.command()
@click.argument("mode", required=False)
def modes(mode):
    """List subset modes, or the buckets of MODE."""
    from fontsplit.config.unicode_ranges import SubsetPlanner

    planner = SubsetPlanner()

    if mode is None:
        for name in planner.modes():
            marker = " (default)" if name == DEFAULT_MODE else ""
            click.echo(f"{name}: {len(planner.plan(name))} subsets{marker}")
        return

    for bucket in planner.buckets(mode):
        click.echo(f"{bucket.name}: {bucket.unicode_range}")


if __name__ == "__main__":
    cli()
