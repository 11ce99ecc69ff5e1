"""Tests for CLI."""

import json
import subprocess
import sys
from pathlib import Path


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    """Run the CLI module in a subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "festival_planner.cli", *args],
        capture_output=True,
        text=True,
    )


def test_cli_validate_basic(timetable_basic: Path, line_up_basic: Path) -> None:
    """Test CLI validate command."""
    result = run_cli(
        "validate", "--timetable", str(timetable_basic), "--line-up", str(line_up_basic)
    )

    assert result.returncode == 0
    assert "Validation successful" in result.stdout


def test_cli_validate_invalid(tmp_path: Path) -> None:
    """Test CLI validate command on a malformed timetable."""
    path = tmp_path / "timetable.txt"
    path.write_text("0\n", encoding="utf-8")

    result = run_cli("validate", "--timetable", str(path))

    assert result.returncode == 1
    assert "invalid number of sessions" in result.stdout


def test_cli_reach(timetable_basic: Path) -> None:
    """Test CLI reach command."""
    result = run_cli("reach", "--timetable", str(timetable_basic), "Stage", "1", "Field", "3")

    assert result.returncode == 0
    assert "Reachable" in result.stdout

    result = run_cli(
        "reach", "--timetable", str(timetable_basic), "Field", "1", "Stage", "3", "--no-memoize"
    )

    assert result.returncode == 1
    assert "Not reachable" in result.stdout


def test_cli_check_compatible(timetable_basic: Path, line_up_basic: Path) -> None:
    """Test CLI check command on a compatible plan."""
    result = run_cli(
        "check",
        "--timetable",
        str(timetable_basic),
        "--line-up",
        str(line_up_basic),
        "Opening Band",
        "Headliner",
    )

    assert result.returncode == 0
    assert "Plan is compatible" in result.stdout


def test_cli_check_json(timetable_basic: Path, line_up_basic: Path) -> None:
    """Test CLI check command with JSON output."""
    result = run_cli(
        "check",
        "--timetable",
        str(timetable_basic),
        "--line-up",
        str(line_up_basic),
        "--json",
        "Jazz Trio",
        "Acoustic Set",
    )

    assert result.returncode == 1
    report = json.loads(result.stdout)
    assert report["compatible"] is False
    assert len(report["events"]) == 2


def test_cli_check_unknown_act(timetable_basic: Path, line_up_basic: Path) -> None:
    """Test CLI check command with an act missing from the line-up."""
    result = run_cli(
        "check", "--timetable", str(timetable_basic), "--line-up", str(line_up_basic), "Nobody"
    )

    assert result.returncode == 1
    assert "Error" in result.stderr


def test_cli_routes(timetable_basic: Path, tmp_path: Path) -> None:
    """Test CLI routes command, printed and written to JSON."""
    result = run_cli("routes", "--timetable", str(timetable_basic))

    assert result.returncode == 0
    assert "2 services" in result.stdout
    assert "Stage -> Tent (session 1)" in result.stdout

    output = tmp_path / "out"
    result = run_cli("routes", "--timetable", str(timetable_basic), "--output", str(output))

    assert result.returncode == 0
    assert (output / "timetable.json").exists()


def test_cli_version() -> None:
    """Test CLI version flag."""
    result = run_cli("--version")

    assert result.returncode == 0
    assert "0.1.0" in result.stdout


def test_cli_help() -> None:
    """Test CLI help."""
    result = run_cli("--help")

    assert result.returncode == 0
    for command in ("validate", "reach", "check", "routes"):
        assert command in result.stdout


def test_cli_missing_file() -> None:
    """Test CLI with a missing timetable file."""
    result = run_cli("routes", "--timetable", "/nonexistent/timetable.txt")

    assert result.returncode == 1
    assert "Error" in result.stderr
