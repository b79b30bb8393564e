"""
Subprocess execution utilities with consistent error handling.
"""

import importlib.util
import shutil
import subprocess
import sys
from pathlib import Path

from fontsplit.core.errors import (
    MetadataExtractionError,
    SubsetExtractionError,
    ToolUnavailableError,
)
from fontsplit.utils.logging import logger


def run_command(
    cmd: list[str],
    description: str | None = None,
    exit_on_error: bool = True,
    timeout: float | None = None,
) -> subprocess.CompletedProcess:
    """
    Run a subprocess command with consistent logging and error handling.

    Args:
        cmd: Command and arguments to run
        description: Optional description for logging
        exit_on_error: Whether to exit on failure (default True)
        timeout: Seconds to wait before the command is killed

    Returns:
        CompletedProcess result

    Raises:
        SystemExit: If exit_on_error is True and command fails
        subprocess.CalledProcessError: If the command exits non-zero
        subprocess.TimeoutExpired: If the command outlives the timeout
    """
    if description:
        logger.debug(description)

    try:
        result = subprocess.run(
            cmd,
            check=True,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
        if result.stdout:
            logger.debug(result.stdout)
        return result
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Command failed: {' '.join(cmd)}")
        if e.stderr:
            logger.debug(e.stderr)
        if exit_on_error:
            sys.exit(1)
        raise


def first_line(error: BaseException) -> str:
    """First non-empty line of an error, preferring captured stderr."""
    stderr = getattr(error, "stderr", None)
    # TimeoutExpired carries raw bytes even when text=True
    if isinstance(stderr, bytes):
        stderr = stderr.decode(errors="replace")
    for text in (stderr, str(error)):
        if text:
            for line in text.splitlines():
                if line.strip():
                    return line.strip()
    return type(error).__name__


def _locate(executable: str, module: str, tool: str) -> list[str]:
    if shutil.which(executable):
        return [executable]
    if importlib.util.find_spec(module) is not None:
        return [sys.executable, "-m", module]
    raise ToolUnavailableError(tool)


def locate_subset_tool() -> list[str]:
    """
    Find the pyftsubset command.

    Returns:
        Command prefix: ``pyftsubset`` when it is on PATH, otherwise
        ``python -m fontTools.subset``

    Raises:
        ToolUnavailableError: If neither form is available
    """
    return _locate("pyftsubset", "fontTools.subset", "pyftsubset")


def locate_metadata_tool() -> list[str]:
    """
    Find the ttx command used to dump name tables.

    Returns:
        Command prefix: ``fonttools ttx`` when fonttools is on PATH,
        otherwise ``python -m fontTools.ttx``

    Raises:
        ToolUnavailableError: If neither form is available
    """
    prefix = _locate("fonttools", "fontTools.ttx", "ttx")
    if prefix == ["fonttools"]:
        return ["fonttools", "ttx"]
    return prefix


def run_ttx_name_table(
    tool: list[str],
    input_font: Path,
    output_file: Path,
    timeout: float | None = None,
) -> subprocess.CompletedProcess:
    """
    Dump the name table of a font as ttx XML.

    Args:
        tool: Command prefix from locate_metadata_tool
        input_font: Input font path
        output_file: Where to write the XML dump
        timeout: Seconds before giving up

    Returns:
        CompletedProcess result

    Raises:
        MetadataExtractionError: If the dump cannot be produced
    """
    cmd = [*tool, "-q", "-t", "name", "-o", str(output_file), str(input_font)]

    try:
        return run_command(
            cmd,
            f"Reading name table of {input_font.name}",
            exit_on_error=False,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise MetadataExtractionError(f"ttx timed out after {timeout}s") from e
    except (subprocess.CalledProcessError, OSError) as e:
        raise MetadataExtractionError(first_line(e)) from e


def run_pyftsubset(
    tool: list[str],
    input_font: Path,
    output_file: Path,
    unicodes: str,
    *,
    flavor: str = "woff2",
    timeout: float | None = None,
) -> subprocess.CompletedProcess:
    """
    Run pyftsubset to cut one web font subset.

    Layout features are kept, hinting is dropped and CFF charstrings are
    desubroutinized.

    Args:
        tool: Command prefix from locate_subset_tool
        input_font: Input font path
        output_file: Output file path
        unicodes: Comma-separated Unicode ranges
        flavor: Output flavor passed to --flavor
        timeout: Seconds before the subsetter is killed

    Returns:
        CompletedProcess result

    Raises:
        SubsetExtractionError: If pyftsubset fails, hangs or cannot start
    """
    cmd = [
        *tool,
        str(input_font),
        f"--output-file={output_file}",
        f"--flavor={flavor}",
        f"--unicodes={unicodes}",
        "--layout-features=*",
        "--no-hinting",
        "--desubroutinize",
    ]

    try:
        return run_command(
            cmd,
            f"Subsetting {input_font.name} -> {output_file.name}",
            exit_on_error=False,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise SubsetExtractionError(f"pyftsubset timed out after {timeout}s") from e
    except (subprocess.CalledProcessError, OSError) as e:
        raise SubsetExtractionError(first_line(e)) from e
