"""Exceptions raised by the festival timetable, line-up and readers."""


class FestivalError(Exception):
    """Base class for festival planner errors."""


class DuplicateServiceError(FestivalError, ValueError):
    """An equal service is already present in the timetable."""

    def __init__(self, service: object) -> None:
        super().__init__(f"Duplicate service: {service}")
        self.service = service


class InvalidLineUpError(FestivalError, ValueError):
    """A line-up already holds an event at the same venue and session."""

    def __init__(self, event: object) -> None:
        super().__init__(f"More than one event scheduled for the same venue and session: {event}")
        self.event = event


class FormatError(FestivalError):
    """Input file does not follow the expected format."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number
        self.message = message
