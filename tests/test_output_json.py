"""Tests for JSON output."""

import json
from pathlib import Path

from festival_planner.festival.models import Event, PlanReport, Venue
from festival_planner.festival.schedule_reader import read_timetable
from festival_planner.output.json import plan_report_to_dict, timetable_to_dict, write_timetable_json


def test_timetable_to_dict(timetable_basic: Path) -> None:
    """Test timetable conversion is complete and ordered."""
    data = timetable_to_dict(read_timetable(timetable_basic))

    assert data["sessions"] == [1, 2]
    assert data["venues"] == ["Field", "Stage", "Tent"]
    assert data["services"] == [
        {"source": "Stage", "destination": "Tent", "session": 1},
        {"source": "Tent", "destination": "Field", "session": 2},
    ]


def test_write_timetable_json(timetable_dense: Path, tmp_path: Path) -> None:
    """Test writing timetable.json."""
    output = tmp_path / "out"
    written = write_timetable_json(output, read_timetable(timetable_dense))

    assert written == str(output / "timetable.json")
    with open(written, encoding="utf-8") as f:
        data = json.load(f)

    assert len(data["services"]) == 10
    sessions = [service["session"] for service in data["services"]]
    assert sessions == sorted(sessions)


def test_write_timetable_json_deterministic(timetable_dense: Path, tmp_path: Path) -> None:
    """Test the same timetable always produces identical JSON."""
    timetable = read_timetable(timetable_dense)
    first = Path(write_timetable_json(tmp_path / "a", timetable)).read_text(encoding="utf-8")
    second = Path(write_timetable_json(tmp_path / "b", timetable)).read_text(encoding="utf-8")

    assert first == second


def test_plan_report_to_dict() -> None:
    """Test plan report conversion."""
    report = PlanReport(
        compatible=False,
        events=[Event(Venue("Stage"), 1, "Opening Band")],
        reason="some reason",
    )

    assert plan_report_to_dict(report) == {
        "compatible": False,
        "reason": "some reason",
        "events": [{"act": "Opening Band", "session": 1, "venue": "Stage"}],
    }
