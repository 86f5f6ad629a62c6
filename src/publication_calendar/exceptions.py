"""Exceptions for contract violations in the calendar core.

Data-quality problems in the release list are never raised; they are
reported as diagnostics. These exceptions signal caller errors only.
"""


class PublicationCalendarError(Exception):
    """Base exception for publication calendar errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class UnsortedReleasesError(PublicationCalendarError, ValueError):
    """Raised when releases are not sorted ascending by chapter number."""

    def __init__(self, previous: int, current: int):
        self.previous = previous
        self.current = current
        super().__init__(
            f"Releases must be sorted by chapter number: "
            f"chapter {current} follows chapter {previous}"
        )


class DuplicateChapterError(PublicationCalendarError, ValueError):
    """Raised when the same chapter number appears more than once."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"Duplicate chapter number: {number}")
