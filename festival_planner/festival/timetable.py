"""Shuttle timetable holding every service of a festival."""

import logging
from collections.abc import Iterable, Iterator

from festival_planner.festival.errors import DuplicateServiceError
from festival_planner.festival.models import Service, Venue

logger = logging.getLogger(__name__)


class ShuttleTimetable:
    """Set of unique shuttle services, indexed by departure venue and session."""

    def __init__(self, services: Iterable[Service] | None = None) -> None:
        """Create an empty timetable, or an independent copy of the given services."""
        self._services: set[Service] = set()
        # (source venue, session) -> destination venues
        self._destinations: dict[tuple[Venue, int], set[Venue]] = {}

        if services is not None:
            for service in services:
                self.add_service(service)

    def add_service(self, service: Service) -> None:
        """Add a service, rejecting one that is already present."""
        if not isinstance(service, Service):
            raise TypeError(f"Expected a Service, got {type(service).__name__}")
        if service in self._services:
            raise DuplicateServiceError(service)

        self._services.add(service)
        key = (service.source, service.session)
        if key not in self._destinations:
            self._destinations[key] = set()
        self._destinations[key].add(service.destination)

    def has_service(self, service: Service) -> bool:
        """Return True if an equal service is in the timetable."""
        return service in self._services

    def destinations(self, venue: Venue, session: int) -> frozenset[Venue]:
        """Venues reachable from venue by one service departing at session."""
        return frozenset(self._destinations.get((venue, session), ()))

    def venues(self) -> frozenset[Venue]:
        """Every venue that some service departs from or arrives at."""
        found: set[Venue] = set()
        for service in self._services:
            found.add(service.source)
            found.add(service.destination)
        return frozenset(found)

    def sessions(self) -> frozenset[int]:
        """Every session with at least one departing service."""
        return frozenset(service.session for service in self._services)

    def copy(self) -> "ShuttleTimetable":
        """Return an independent copy of this timetable."""
        return ShuttleTimetable(self)

    def __contains__(self, service: object) -> bool:
        return service in self._services

    def __iter__(self) -> Iterator[Service]:
        return iter(list(self._services))

    def __len__(self) -> int:
        return len(self._services)

    def __repr__(self) -> str:
        return f"ShuttleTimetable({len(self._services)} services)"
