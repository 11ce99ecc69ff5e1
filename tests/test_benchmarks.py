"""Benchmark tests."""

import pytest

from festival_planner.festival.models import PlannerConfig, Service, Venue
from festival_planner.festival.timetable import ShuttleTimetable
from festival_planner.planning.day_planner import DayPlanner

SESSIONS = 12
VENUES = [Venue(f"Venue{i}") for i in range(8)]


def _dense_timetable() -> ShuttleTimetable:
    """Every venue has a shuttle to every other venue in every session but the last."""
    timetable = ShuttleTimetable()
    target = VENUES[-1]
    for session in range(1, SESSIONS):
        for source in VENUES[:-1]:
            for destination in VENUES[:-1]:
                if source != destination:
                    timetable.add_service(Service(source, destination, session))
    # the last venue is only served at the very end
    timetable.add_service(Service(VENUES[0], target, SESSIONS - 1))
    return timetable


@pytest.mark.benchmark
def test_bench_can_reach_memoized(benchmark: object) -> None:
    """Benchmark a deep search with sub-search caching."""
    planner = DayPlanner(_dense_timetable(), PlannerConfig(memoize=True))

    result = benchmark(planner.can_reach, VENUES[1], 1, VENUES[-1], SESSIONS)  # type: ignore[operator]

    assert result


@pytest.mark.benchmark
def test_bench_can_reach_unreachable(benchmark: object) -> None:
    """Benchmark an exhaustive search that arrives one session too late."""
    planner = DayPlanner(_dense_timetable(), PlannerConfig(memoize=True))

    result = benchmark(planner.can_reach, VENUES[1], 1, VENUES[-1], SESSIONS - 1)  # type: ignore[operator]

    assert not result
