"""Festival line-up reader.

Each line of a line-up file describes one event::

    The Decemberists: session 2 at Stage

The act is made of ASCII word characters and single spaces, the session is a
positive integer and the venue is any run of non-whitespace characters.
"""

import logging
import re
from pathlib import Path

from festival_planner.festival.errors import FormatError, InvalidLineUpError
from festival_planner.festival.lineup import LineUp
from festival_planner.festival.models import Event, Venue
from festival_planner.festival.schedule_reader import split_lines

logger = logging.getLogger(__name__)

EVENT_PATTERN = re.compile(r"([\w ]+): session \+?(\d+) at (\S+)", re.ASCII)


class LineUpReader:
    """Read a festival line-up from a text file."""

    def __init__(self, line_up_path: str | Path) -> None:
        """Initialize reader with the line-up file path."""
        self.line_up_path = Path(line_up_path)

    def read(self) -> LineUp:
        """Parse the file and return its line-up."""
        if not self.line_up_path.is_file():
            raise FileNotFoundError(f"Line-up file not found: {self.line_up_path}")

        logger.info(f"Reading line-up from {self.line_up_path}")
        line_up = LineUp()
        with open(self.line_up_path, encoding="utf-8") as f:
            for line_number, line in enumerate(split_lines(f.read()), start=1):
                event = parse_event(line, line_number)
                try:
                    line_up.add_event(event)
                except InvalidLineUpError as e:
                    raise FormatError(
                        line_number, "more than one event scheduled for the same venue and session"
                    ) from e

        logger.info(f"Loaded {len(line_up)} events")
        return line_up


def parse_event(line: str, line_number: int) -> Event:
    """Parse one ``ACT: session SESSION at VENUE`` line."""
    match = EVENT_PATTERN.fullmatch(line)
    if match is None:
        raise FormatError(line_number, "event incorrectly formatted")

    act, session_text, venue_name = match.groups()
    session = int(session_text)
    if session <= 0:
        raise FormatError(
            line_number, f"event incorrectly formatted. {session_text} is not a positive integer"
        )
    try:
        return Event(Venue(venue_name), session, act)
    except ValueError as e:
        raise FormatError(line_number, f"event incorrectly formatted. {e}") from e


def read_line_up(line_up_path: str | Path) -> LineUp:
    """Read and return the line-up stored at line_up_path."""
    return LineUpReader(line_up_path).read()
