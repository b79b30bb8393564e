"""Tests for subprocess helpers."""

import subprocess
import sys

import pytest

from fontsplit.core.errors import SubsetExtractionError, ToolUnavailableError
from fontsplit.utils import subprocess as fs_subprocess
from fontsplit.utils.subprocess import (
    first_line,
    locate_metadata_tool,
    locate_subset_tool,
    run_command,
    run_pyftsubset,
)


def test_run_pyftsubset_builds_argument_list(tmp_path, monkeypatch):
    calls = []

    def fake_run(cmd, description=None, exit_on_error=True, timeout=None):
        calls.append((cmd, exit_on_error, timeout))

    monkeypatch.setattr(fs_subprocess, "run_command", fake_run)

    font = tmp_path / "My Font; rm -rf.ttf"
    run_pyftsubset(["pyftsubset"], font, tmp_path / "out.woff2", "U+0020-007E", timeout=5)

    cmd, exit_on_error, timeout = calls[0]
    assert cmd == [
        "pyftsubset",
        str(font),
        f"--output-file={tmp_path / 'out.woff2'}",
        "--flavor=woff2",
        "--unicodes=U+0020-007E",
        "--layout-features=*",
        "--no-hinting",
        "--desubroutinize",
    ]
    assert exit_on_error is False
    assert timeout == 5


def test_run_pyftsubset_wraps_failures(tmp_path):
    with pytest.raises(SubsetExtractionError):
        run_pyftsubset(
            [sys.executable, "-c", "import sys; sys.exit(3)"],
            tmp_path / "in.ttf",
            tmp_path / "out.woff2",
            "U+0041",
        )


def test_run_command_exits_on_error():
    with pytest.raises(SystemExit):
        run_command([sys.executable, "-c", "import sys; sys.exit(1)"])


def test_run_command_raises_when_not_exiting():
    with pytest.raises(subprocess.CalledProcessError):
        run_command([sys.executable, "-c", "import sys; sys.exit(1)"], exit_on_error=False)


def test_first_line_prefers_stderr():
    error = subprocess.CalledProcessError(1, ["x"], stderr="\nboom\nmore\n")
    assert first_line(error) == "boom"
    assert first_line(RuntimeError("")) == "RuntimeError"


def test_locate_tools_fall_back_to_module(monkeypatch):
    monkeypatch.setattr(fs_subprocess.shutil, "which", lambda name: None)

    assert locate_subset_tool() == [sys.executable, "-m", "fontTools.subset"]
    assert locate_metadata_tool() == [sys.executable, "-m", "fontTools.ttx"]


def test_locate_tools_prefer_path(monkeypatch):
    monkeypatch.setattr(fs_subprocess.shutil, "which", lambda name: f"/usr/bin/{name}")

    assert locate_subset_tool() == ["pyftsubset"]
    assert locate_metadata_tool() == ["fonttools", "ttx"]


def test_locate_tools_unavailable(monkeypatch):
    monkeypatch.setattr(fs_subprocess.shutil, "which", lambda name: None)
    monkeypatch.setattr(fs_subprocess.importlib.util, "find_spec", lambda name: None)

    with pytest.raises(ToolUnavailableError) as excinfo:
        locate_subset_tool()
    assert "fonttools[woff]" in excinfo.value.hint


def test_first_line_decodes_timeout_bytes():
    error = subprocess.TimeoutExpired(["x"], 1, stderr=b"\xffstuck\nmore\n")
    assert first_line(error) == "�stuck"


def test_run_command_replaces_undecodable_output():
    script = "import sys; sys.stdout.buffer.write(b'ok \\xff'); sys.stdout.flush()"
    result = run_command([sys.executable, "-c", script], exit_on_error=False)
    assert result.stdout == "ok �"
