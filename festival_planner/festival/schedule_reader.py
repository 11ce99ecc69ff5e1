"""Shuttle timetable reader.

The timetable file starts with a line holding the number of sessions in the
festival. It is followed by zero or more venue blocks::

    Stage
    1 Tent Field
    2
    3 Tent

Each block is a venue name on its own line, then one line per session (in
order, starting at 1) listing the session number and the venues served by
shuttles leaving at the end of that session, then an empty line. Surrounding
whitespace is allowed on every line except the terminating empty line.
"""

import logging
import re
from pathlib import Path

from festival_planner.festival.errors import FormatError
from festival_planner.festival.models import Service, Venue
from festival_planner.festival.timetable import ShuttleTimetable

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[-+]?\d+", re.ASCII)
_LINE_BREAK = re.compile("\r\n|[\n\r\u2028\u2029\u0085]")


class ScheduleReader:
    """Read a shuttle timetable from a text file."""

    def __init__(self, schedule_path: str | Path) -> None:
        """Initialize reader with the timetable file path."""
        self.schedule_path = Path(schedule_path)
        self.session_count = 0
        self.source_venues: set[Venue] = set()
        self.timetable = ShuttleTimetable()

    def read(self) -> ShuttleTimetable:
        """Parse the file and return the timetable it describes."""
        if not self.schedule_path.is_file():
            raise FileNotFoundError(f"Timetable file not found: {self.schedule_path}")

        logger.info(f"Reading shuttle timetable from {self.schedule_path}")
        with open(self.schedule_path, encoding="utf-8") as f:
            lines = split_lines(f.read())

        self.source_venues = set()
        self.timetable = ShuttleTimetable()
        self.session_count = self._read_session_count(lines)

        index = 1
        while index < len(lines):
            source = self._read_source_venue(lines[index], index + 1)
            index += 1
            for session in range(1, self.session_count + 1):
                if index >= len(lines):
                    raise FormatError(index + 1, f"not enough sessions for {source}")
                self._read_services(lines[index], index + 1, source, session)
                index += 1
            self._check_line_is_empty(lines[index] if index < len(lines) else None, index + 1)
            index += 1

        logger.info(
            f"Loaded {len(self.timetable)} services from {len(self.source_venues)} venues "
            f"over {self.session_count} sessions"
        )
        return self.timetable

    def _read_session_count(self, lines: list[str]) -> int:
        """Read the number of sessions from the first line."""
        if not lines:
            raise FormatError(1, "number of sessions not specified")

        tokens = lines[0].split()
        count = _parse_int(tokens[0]) if tokens else None
        if count is None or count <= 0:
            raise FormatError(1, "invalid number of sessions")
        if len(tokens) > 1:
            raise FormatError(1, "extra information on line")
        return count

    def _read_source_venue(self, line: str, line_number: int) -> Venue:
        """Read the venue heading a block, which must not have been described before."""
        tokens = line.split()
        if not tokens:
            raise FormatError(line_number, "no venue name given")

        source = Venue(tokens[0])
        if source in self.source_venues:
            raise FormatError(line_number, f"duplicate source venue {source}")
        if len(tokens) > 1:
            raise FormatError(line_number, "extra information on line")

        self.source_venues.add(source)
        return source

    def _read_services(self, line: str, line_number: int, source: Venue, session: int) -> None:
        """Read the services leaving source at the end of session."""
        tokens = line.split()
        number = _parse_int(tokens[0]) if tokens else None
        if number is None:
            raise FormatError(line_number, f"missing session number {session}")
        if number != session:
            raise FormatError(
                line_number, f"wrong session number. Expected {session} but was {number}"
            )

        for name in tokens[1:]:
            destination = Venue(name)
            if destination == source:
                raise FormatError(
                    line_number, "source and destination must be distinct for a service"
                )
            service = Service(source, destination, session)
            if self.timetable.has_service(service):
                raise FormatError(line_number, f"duplicate service detected: {service}")
            self.timetable.add_service(service)

    @staticmethod
    def _check_line_is_empty(line: str | None, line_number: int) -> None:
        """Require the empty line that terminates a venue block."""
        if line != "":
            raise FormatError(line_number, "empty line expected")


def split_lines(text: str) -> list[str]:
    """Split text into lines on \\r\\n, \\n, \\r, U+2028, U+2029 and U+0085 only."""
    lines = _LINE_BREAK.split(text)
    # a terminator at the very end does not start another line
    if lines[-1] == "":
        lines.pop()
    return lines


def _parse_int(token: str) -> int | None:
    """Parse a decimal integer token, or return None."""
    if not _INTEGER.fullmatch(token):
        return None
    return int(token)


def read_timetable(schedule_path: str | Path) -> ShuttleTimetable:
    """Read and return the shuttle timetable stored at schedule_path."""
    return ScheduleReader(schedule_path).read()
