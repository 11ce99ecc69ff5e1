"""Festival Planner - Shuttle timetables and day-plan reachability checks."""

from festival_planner.api import check_plan, load_line_up, load_timetable, reach, validate
from festival_planner.festival.errors import (
    DuplicateServiceError,
    FestivalError,
    FormatError,
    InvalidLineUpError,
)
from festival_planner.festival.lineup import LineUp
from festival_planner.festival.models import Event, PlannerConfig, Service, Venue
from festival_planner.festival.timetable import ShuttleTimetable
from festival_planner.planning.day_planner import DayPlanner
from festival_planner.version import VERSION

__version__ = VERSION
__all__ = [
    "VERSION",
    "DayPlanner",
    "DuplicateServiceError",
    "Event",
    "FestivalError",
    "FormatError",
    "InvalidLineUpError",
    "LineUp",
    "PlannerConfig",
    "Service",
    "ShuttleTimetable",
    "Venue",
    "check_plan",
    "load_line_up",
    "load_timetable",
    "reach",
    "validate",
]
