"""Data models for the festival timetable, line-up and planning results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Venue:
    """Named festival location, compared by exact name."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Venue name must be a non-empty string")
        if any(ch.isspace() for ch in self.name):
            raise ValueError(f"Venue name must not contain whitespace: {self.name!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Service:
    """Shuttle service departing source at the end of a session and arriving at destination."""

    source: Venue
    destination: Venue
    session: int

    def __post_init__(self) -> None:
        check_session(self.session)
        if self.source == self.destination:
            raise ValueError(f"Service cannot depart and arrive at the same venue: {self.source}")

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination} (session {self.session})"


@dataclass(frozen=True)
class Event:
    """Line-up entry: an act performing at a venue during a session."""

    venue: Venue
    session: int
    act: str

    def __post_init__(self) -> None:
        check_session(self.session)
        if not self.act:
            raise ValueError("Event act must be a non-empty string")

    def __str__(self) -> str:
        return f"{self.act}: session {self.session} at {self.venue}"


@dataclass(frozen=True)
class AdjacencyIndex:
    """Read-only lookup from (venue, session) to the venues one service away."""

    destinations: Mapping[tuple[Venue, int], frozenset[Venue]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    venues: frozenset[Venue] = frozenset()
    sessions: frozenset[int] = frozenset()

    def lookup(self, venue: Venue, session: int) -> frozenset[Venue]:
        """Venues reachable from venue by a service departing at session."""
        return self.destinations.get((venue, session), frozenset())


@dataclass
class ValidationReport:
    """Report from validation process."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


@dataclass
class PlanReport:
    """Outcome of checking a day plan for compatibility."""

    compatible: bool
    events: list[Event] = field(default_factory=list)
    reason: str = ""


@dataclass
class PlannerConfig:
    """Configuration for the day planner."""

    memoize: bool = True  # cache sub-searches within one reachability query
    sort_plan: bool = True  # order resolved events by session before checking


def check_session(session: int) -> None:
    """Reject session numbers that are not positive integers."""
    if isinstance(session, bool) or not isinstance(session, int):
        raise ValueError(f"Session must be an integer, got {session!r}")
    if session <= 0:
        raise ValueError(f"Session must be positive, got {session}")
