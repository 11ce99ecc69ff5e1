"""Day plan validator."""

import logging
from collections.abc import Sequence

from festival_planner.festival.lineup import LineUp
from festival_planner.festival.models import Event, ValidationReport
from festival_planner.festival.timetable import ShuttleTimetable

logger = logging.getLogger(__name__)


class PlanValidator:
    """Check a day plan against the preconditions of a compatibility check."""

    def __init__(
        self,
        plan: Sequence[Event | None],
        line_up: LineUp | None = None,
        timetable: ShuttleTimetable | None = None,
    ) -> None:
        """Initialize validator with a plan and, optionally, the festival it belongs to."""
        self.plan = plan
        self.line_up = line_up
        self.timetable = timetable
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate(self) -> ValidationReport:
        """Run all validation checks."""
        logger.info(f"Validating plan of {len(self.plan)} events")

        self._validate_entries()
        events = [event for event in self.plan if event is not None]
        self._validate_order(events)
        self._validate_sessions(events)
        self._validate_line_up(events)
        self._validate_venues(events)

        valid = len(self.errors) == 0

        stats = {
            "events": len(events),
            "sessions": len({event.session for event in events}),
            "venues": len({event.venue for event in events}),
        }

        report = ValidationReport(
            valid=valid,
            errors=self.errors.copy(),
            warnings=self.warnings.copy(),
            stats=stats,
        )

        if not valid:
            logger.error(f"Plan validation failed with {len(self.errors)} errors")
        elif self.warnings:
            logger.warning(f"Plan validation passed with {len(self.warnings)} warnings")
        else:
            logger.info("Plan validation passed")

        return report

    def _validate_entries(self) -> None:
        """Validate the plan has no missing entries."""
        for position, event in enumerate(self.plan, start=1):
            if event is None:
                self.errors.append(f"Plan entry {position} is missing")

    def _validate_order(self, events: list[Event]) -> None:
        """Validate events are ordered by session."""
        for previous, following in zip(events, events[1:]):
            if following.session < previous.session:
                self.errors.append(
                    f"Event '{following}' is scheduled before the preceding event '{previous}'"
                )

    def _validate_sessions(self, events: list[Event]) -> None:
        """Warn about events that share a session, which no plan can attend."""
        seen: dict[int, Event] = {}
        for event in events:
            if event.session in seen:
                self.warnings.append(
                    f"Events '{seen[event.session]}' and '{event}' share session {event.session}"
                )
            else:
                seen[event.session] = event

    def _validate_line_up(self, events: list[Event]) -> None:
        """Validate events belong to the line-up."""
        if self.line_up is None:
            return

        for event in events:
            if event not in self.line_up:
                self.errors.append(f"Event '{event}' is not in the line-up")

    def _validate_venues(self, events: list[Event]) -> None:
        """Warn about plan venues that no shuttle serves."""
        if self.timetable is None:
            return

        served = self.timetable.venues()
        for venue in sorted({event.venue for event in events}, key=lambda v: v.name):
            if venue not in served:
                self.warnings.append(f"Venue {venue} has no shuttle services")
