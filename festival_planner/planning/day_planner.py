"""Day planner: reachability and plan compatibility over a shuttle timetable.

Every (venue, session) pair is a node of a time-expanded graph. A service
leaving venue ``a`` for venue ``b`` at the end of session ``t`` is an edge from
``(a, t)`` to ``(b, t + 1)``, and staying put at a venue is always allowed.
"""

import logging
from collections.abc import Iterator, Sequence

from festival_planner.festival.models import Event, PlannerConfig, Venue, check_session
from festival_planner.festival.timetable import ShuttleTimetable
from festival_planner.optimization.indexing import build_adjacency_index

logger = logging.getLogger(__name__)


class DayPlanner:
    """Answer reachability queries against a private snapshot of a timetable."""

    def __init__(self, timetable: ShuttleTimetable, config: PlannerConfig | None = None) -> None:
        """Copy the timetable so later changes to the caller's instance are not seen."""
        self._timetable = ShuttleTimetable(timetable)
        self._index = build_adjacency_index(self._timetable)
        self.config = config if config is not None else PlannerConfig()

    @property
    def timetable(self) -> ShuttleTimetable:
        """A copy of the planner's timetable."""
        return self._timetable.copy()

    def can_reach(
        self,
        source_venue: Venue,
        source_session: int,
        destination_venue: Venue,
        destination_session: int,
    ) -> bool:
        """
        Check whether destination can be reached in time from source.

        Args:
            source_venue: Venue attended during source_session
            source_session: Session spent at source_venue
            destination_venue: Venue to be at for destination_session
            destination_session: Session that must be attended at destination_venue

        Returns:
            True if waiting and shuttle services can get a traveller there on time
        """
        check_session(source_session)
        check_session(destination_session)

        memo: dict[tuple[Venue, int], bool] | None = {} if self.config.memoize else None
        reachable = self._search(
            source_venue, source_session, destination_venue, destination_session, memo
        )
        logger.debug(
            f"can_reach {source_venue}@{source_session} -> "
            f"{destination_venue}@{destination_session}: {reachable}"
        )
        return reachable

    def can_reach_event(self, source: Event, destination: Event) -> bool:
        """Check whether destination's event can be reached after attending source."""
        return self.can_reach(source.venue, source.session, destination.venue, destination.session)

    def compatible(self, plan: Sequence[Event]) -> bool:
        """
        Check whether every event of a session-ordered plan can be attended in turn.

        Two events in the same session are never compatible. Otherwise each
        event must be reachable from the one before it.
        """
        return self.incompatibility(plan) == ""

    def incompatibility(self, plan: Sequence[Event]) -> str:
        """Describe the first adjacent pair that breaks the plan, or return an empty string."""
        _check_plan(plan)

        for previous, following in zip(plan, plan[1:]):
            if previous.session == following.session:
                logger.debug(f"Plan has two events in session {previous.session}")
                return f"'{previous}' and '{following}' are in the same session"
            if not self.can_reach_event(previous, following):
                logger.debug(f"Cannot get from {previous} to {following}")
                return f"'{following}' cannot be reached in time after '{previous}'"
        return ""

    def _search(
        self,
        source_venue: Venue,
        source_session: int,
        destination_venue: Venue,
        destination_session: int,
        memo: dict[tuple[Venue, int], bool] | None,
    ) -> bool:
        """Depth-first search of the time-expanded graph towards a fixed goal."""
        known = _resolve(source_venue, source_session, destination_venue, destination_session, memo)
        if known is not None:
            return known

        # Explicit stack of (node, remaining departures) so long chains do not hit
        # the recursion limit
        stack = [
            (
                (source_venue, source_session),
                self._departures(source_venue, source_session, destination_session),
            )
        ]
        while stack:
            node, departures = stack[-1]
            for venue, session in departures:
                known = _resolve(venue, session, destination_venue, destination_session, memo)
                if known is None:
                    stack.append(
                        ((venue, session), self._departures(venue, session, destination_session))
                    )
                    break
                if known:
                    if memo is not None:
                        for pending, _ in stack:
                            memo[pending] = True
                    return True
            else:
                stack.pop()
                if memo is not None:
                    memo[node] = False
        return False

    def _departures(
        self, venue: Venue, session: int, destination_session: int
    ) -> Iterator[tuple[Venue, int]]:
        """Nodes one service away from venue, leaving at session or any later session."""
        for departure in range(session, destination_session):
            for next_venue in self._index.lookup(venue, departure):
                yield next_venue, departure + 1


def _resolve(
    venue: Venue,
    session: int,
    destination_venue: Venue,
    destination_session: int,
    memo: dict[tuple[Venue, int], bool] | None,
) -> bool | None:
    """Answer a node without searching, or return None if it must be expanded."""
    # No travelling back in time
    if destination_session < session:
        return False
    # Within one session a traveller cannot change venue
    if destination_session == session:
        return venue == destination_venue
    # Waiting at the destination is always possible
    if venue == destination_venue:
        return True
    if memo is not None:
        return memo.get((venue, session))
    return None


def _check_plan(plan: Sequence[Event]) -> None:
    """Reject plans with missing entries or events out of session order."""
    if any(event is None for event in plan):
        raise ValueError("Plan must not contain missing events")
    for previous, following in zip(plan, plan[1:]):
        if following.session < previous.session:
            raise ValueError(
                f"Plan is not ordered by session: {previous} is followed by {following}"
            )
