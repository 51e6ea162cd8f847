"""Tests for CLI tool."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
EXAMPLE_FILE = ROOT / "examples" / "layouts.py"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "datascheme.cli.main", *args],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": os.pathsep.join([str(ROOT / "src"), os.environ.get("PYTHONPATH", "")])},
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "datascheme: binary buffer layouts" in result.stdout
    assert "--analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert "datascheme 0.2.0" in result.stdout


def test_cli_analyze_example_file() -> None:
    """Test CLI --analyze with the example layouts."""
    if not EXAMPLE_FILE.exists():
        pytest.skip("Example file not found")

    result = _run("--analyze", str(EXAMPLE_FILE))
    assert result.returncode == 0
    assert "layouts loaded" in result.stdout
    assert "PACKET" in result.stdout
    assert "HEADER" in result.stdout
    assert "unsized" in result.stdout
    assert "[version:4, flags:4]" in result.stdout


def test_cli_analyze_missing_file() -> None:
    """Test CLI --analyze with missing file."""
    result = _run("--analyze", "nonexistent.py")
    assert result.returncode == 1
    assert "not found" in result.stderr.lower()


def test_cli_analyze_no_layouts(tmp_path: Path) -> None:
    """Test CLI --analyze with a file defining no layouts."""
    empty = tmp_path / "empty.py"
    empty.write_text("VALUE = 1\n")

    result = _run("--analyze", str(empty))
    assert result.returncode == 0
    assert "No layouts found" in result.stdout


def test_cli_decode() -> None:
    """Test CLI --decode with a named scheme."""
    if not EXAMPLE_FILE.exists():
        pytest.skip("Example file not found")

    result = _run("--file", str(EXAMPLE_FILE), "--scheme", "NAME_PAIR", "--decode", "04746573740431323334")
    assert result.returncode == 0
    assert "'first': 'test'" in result.stdout
    assert "'second': '1234'" in result.stdout


def test_cli_decode_truncated() -> None:
    """Test CLI --decode with input too short for the layout."""
    if not EXAMPLE_FILE.exists():
        pytest.skip("Example file not found")

    result = _run("--file", str(EXAMPLE_FILE), "--scheme", "PACKET", "--decode", "12")
    assert result.returncode == 1
    assert "Truncated input" in result.stderr


def test_cli_decode_requires_file() -> None:
    """Test CLI --decode without --file."""
    result = _run("--decode", "00")
    assert result.returncode == 1
    assert "requires --file" in result.stderr


def test_cli_decode_bad_hex() -> None:
    """Test CLI --decode with invalid hex."""
    result = _run("--file", str(EXAMPLE_FILE), "--scheme", "PACKET", "--decode", "zz")
    assert result.returncode == 1
    assert "invalid hex" in result.stderr
