"""Indexing structures for fast reachability lookups."""

import logging
from types import MappingProxyType

from festival_planner.festival.models import AdjacencyIndex, Venue
from festival_planner.festival.timetable import ShuttleTimetable

logger = logging.getLogger(__name__)


def build_adjacency_index(timetable: ShuttleTimetable) -> AdjacencyIndex:
    """Build a frozen (venue, session) -> destinations index from a timetable."""
    logger.info("Building adjacency index")

    adjacency: dict[tuple[Venue, int], set[Venue]] = {}
    for service in timetable:
        key = (service.source, service.session)
        if key not in adjacency:
            adjacency[key] = set()
        adjacency[key].add(service.destination)

    destinations = {key: frozenset(venues) for key, venues in adjacency.items()}
    index = AdjacencyIndex(
        destinations=MappingProxyType(destinations),
        venues=timetable.venues(),
        sessions=timetable.sessions(),
    )

    logger.info(
        f"Built index with {len(destinations)} departure points over "
        f"{len(index.venues)} venues and {len(index.sessions)} sessions"
    )
    return index
