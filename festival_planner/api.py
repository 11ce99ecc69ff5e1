"""Public API for festival-planner."""

import logging
from pathlib import Path

from festival_planner.festival.errors import FormatError
from festival_planner.festival.lineup import LineUp
from festival_planner.festival.lineup_reader import read_line_up
from festival_planner.festival.models import (
    Event,
    PlannerConfig,
    PlanReport,
    ValidationReport,
    Venue,
)
from festival_planner.festival.schedule_reader import read_timetable
from festival_planner.festival.timetable import ShuttleTimetable
from festival_planner.festival.validator import PlanValidator
from festival_planner.planning.day_planner import DayPlanner

logger = logging.getLogger(__name__)


def load_timetable(timetable_path: str | Path) -> ShuttleTimetable:
    """Load the shuttle timetable file."""
    return read_timetable(timetable_path)


def load_line_up(line_up_path: str | Path) -> LineUp:
    """Load the line-up file."""
    return read_line_up(line_up_path)


def validate(timetable_path: str, line_up_path: str | None = None) -> ValidationReport:
    """
    Validate a timetable file and, optionally, a line-up file.

    Args:
        timetable_path: Path to the shuttle timetable file
        line_up_path: Optional path to the line-up file

    Returns:
        ValidationReport with results
    """
    logger.info(f"Validating input: {timetable_path}")

    errors: list[str] = []
    warnings: list[str] = []
    stats: dict[str, int] = {}

    timetable: ShuttleTimetable | None = None
    try:
        timetable = load_timetable(timetable_path)
    except (FormatError, FileNotFoundError) as e:
        errors.append(f"Timetable: {e}")
    else:
        stats["services"] = len(timetable)
        stats["venues"] = len(timetable.venues())
        stats["sessions"] = len(timetable.sessions())

    if line_up_path is not None:
        try:
            line_up = load_line_up(line_up_path)
        except (FormatError, FileNotFoundError) as e:
            errors.append(f"Line-up: {e}")
        else:
            stats["events"] = len(line_up)
            if timetable is not None:
                served = timetable.venues()
                for venue in sorted(line_up.venues(), key=lambda v: v.name):
                    if venue not in served:
                        warnings.append(f"Line-up venue {venue} has no shuttle services")

    valid = len(errors) == 0

    if valid:
        logger.info("Validation passed")
    else:
        logger.error(f"Validation failed with {len(errors)} errors")

    return ValidationReport(valid=valid, errors=errors, warnings=warnings, stats=stats)


def reach(
    timetable_path: str,
    source: str,
    source_session: int,
    destination: str,
    destination_session: int,
    config: PlannerConfig | None = None,
) -> bool:
    """Check whether destination can be reached from source using the timetable file."""
    planner = DayPlanner(load_timetable(timetable_path), config)
    return planner.can_reach(Venue(source), source_session, Venue(destination), destination_session)


def resolve_acts(line_up: LineUp, acts: list[str]) -> list[Event]:
    """Map each act name to its single line-up event."""
    events: list[Event] = []
    for act in acts:
        matches = line_up.find_by_act(act)
        if not matches:
            raise ValueError(f"Act not found in line-up: {act}")
        if len(matches) > 1:
            raise ValueError(f"Act appears {len(matches)} times in line-up: {act}")
        events.append(matches[0])
    return events


def check_plan(
    timetable_path: str,
    line_up_path: str,
    acts: list[str],
    config: PlannerConfig | None = None,
) -> PlanReport:
    """
    Check whether a person can attend every act in a day plan.

    Args:
        timetable_path: Path to the shuttle timetable file
        line_up_path: Path to the line-up file
        acts: Act names making up the plan
        config: Optional planner configuration

    Returns:
        PlanReport describing the outcome
    """
    if config is None:
        config = PlannerConfig()

    timetable = load_timetable(timetable_path)
    line_up = load_line_up(line_up_path)

    events = resolve_acts(line_up, acts)
    if config.sort_plan:
        events.sort(key=lambda event: event.session)

    report = PlanValidator(events, line_up, timetable).validate()
    if not report.valid:
        raise ValueError(f"Invalid plan: {'; '.join(report.errors)}")

    reason = DayPlanner(timetable, config).incompatibility(events)
    if not reason:
        logger.info(f"Plan of {len(events)} events is compatible")
        return PlanReport(compatible=True, events=events)

    logger.info(f"Plan is not compatible: {reason}")
    return PlanReport(compatible=False, events=events, reason=reason)
