"""Festival line-up: the events on offer, one per venue and session."""

from collections.abc import Iterator

from festival_planner.festival.errors import InvalidLineUpError
from festival_planner.festival.models import Event, Venue


class LineUp:
    """Ordered collection of events with at most one event per venue and session."""

    def __init__(self) -> None:
        self._events: dict[tuple[Venue, int], Event] = {}

    def add_event(self, event: Event) -> None:
        """Add an event, rejecting a second event at the same venue and session."""
        key = (event.venue, event.session)
        if key in self._events:
            raise InvalidLineUpError(event)
        self._events[key] = event

    def get_event(self, venue: Venue, session: int) -> Event | None:
        """Return the event at venue during session, if any."""
        return self._events.get((venue, session))

    def events_in_session(self, session: int) -> list[Event]:
        """Events scheduled for session, in the order they were added."""
        return [event for event in self._events.values() if event.session == session]

    def find_by_act(self, act: str) -> list[Event]:
        """Events whose act matches exactly."""
        return [event for event in self._events.values() if event.act == act]

    def venues(self) -> frozenset[Venue]:
        return frozenset(event.venue for event in self._events.values())

    def __contains__(self, event: object) -> bool:
        if not isinstance(event, Event):
            return False
        return self._events.get((event.venue, event.session)) == event

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events.values()))

    def __len__(self) -> int:
        return len(self._events)
