"""Exceptions raised by the message parser."""


class ParserError(Exception):
    """Base class for message parser errors."""


class InvalidRangeError(ParserError, ValueError):
    """Raised when a range has negative offsets or starts after it ends."""

    def __init__(self, start: int, end: int):
        super().__init__(f'Invalid range [{start}, {end})')
        self.start = start
        self.end = end


class OverlapError(ParserError):
    """Raised when ranges handed to the merger overlap or exceed the text."""
