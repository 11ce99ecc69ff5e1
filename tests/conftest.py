"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from festival_planner.festival.models import Service, Venue
from festival_planner.festival.timetable import ShuttleTimetable


@pytest.fixture
def timetable_basic() -> Path:
    """Path to a three-session timetable: Stage -> Tent (1), Tent -> Field (2)."""
    return Path(__file__).parent / "fixtures" / "timetable_basic.txt"


@pytest.fixture
def timetable_dense() -> Path:
    """Path to a four-session timetable with services in both directions."""
    return Path(__file__).parent / "fixtures" / "timetable_dense.txt"


@pytest.fixture
def line_up_basic() -> Path:
    """Path to a line-up matching the basic timetable."""
    return Path(__file__).parent / "fixtures" / "lineup_basic.txt"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def chain_timetable() -> ShuttleTimetable:
    """A -> B at session 1 and B -> C at session 2."""
    a, b, c = Venue("VenueA"), Venue("VenueB"), Venue("VenueC")
    return ShuttleTimetable([Service(a, b, 1), Service(b, c, 2)])
