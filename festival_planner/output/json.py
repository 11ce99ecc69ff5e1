"""JSON output for timetables and plan reports."""

import json
import logging
from pathlib import Path
from typing import Any

from festival_planner.festival.models import PlanReport, Service
from festival_planner.festival.timetable import ShuttleTimetable

logger = logging.getLogger(__name__)


def _service_sort_key(service: Service) -> tuple[int, str, str]:
    return (service.session, service.source.name, service.destination.name)


def timetable_to_dict(timetable: ShuttleTimetable) -> dict[str, Any]:
    """Convert a timetable to a JSON-ready dictionary with a stable order."""
    services = sorted(timetable, key=_service_sort_key)
    return {
        "sessions": sorted(timetable.sessions()),
        "venues": sorted(venue.name for venue in timetable.venues()),
        "services": [
            {
                "source": service.source.name,
                "destination": service.destination.name,
                "session": service.session,
            }
            for service in services
        ],
    }


def plan_report_to_dict(report: PlanReport) -> dict[str, Any]:
    """Convert a plan report to a JSON-ready dictionary."""
    return {
        "compatible": report.compatible,
        "reason": report.reason,
        "events": [
            {"act": event.act, "session": event.session, "venue": event.venue.name}
            for event in report.events
        ],
    }


def write_timetable_json(output_path: Path, timetable: ShuttleTimetable) -> str:
    """Write timetable.json into output_path and return the written file path."""
    logger.info(f"Writing timetable JSON to {output_path}")

    output_path.mkdir(parents=True, exist_ok=True)

    timetable_path = output_path / "timetable.json"
    with open(timetable_path, "w", encoding="utf-8") as f:
        json.dump(timetable_to_dict(timetable), f, indent=2, sort_keys=True)
    logger.info(f"Wrote {timetable_path}")

    return str(timetable_path)
