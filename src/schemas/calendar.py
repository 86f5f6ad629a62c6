"""Publication calendar schemas.

A YearCalendar maps the first nominal issue number of every physical issue
that carried a chapter to a JumpIssue cell. Numbers covered by the tail of
a double issue are kept in ``suppressed`` so a renderer can span the cell
instead of drawing a second one.
"""

from pydantic import BaseModel, field_serializer


class JumpIssue(BaseModel):
    """One physical periodical issue with the chapters it carried.

    Attributes:
        year: Calendar year of the issue
        issue_number: First nominal issue number occupied
        label: Raw issue tag of the representative chapter
        chapters: Chapter numbers released in this issue, ascending
        is_double: Whether the issue covers more than one nominal number
        issue_end: Last nominal number covered by a double issue
    """

    year: int
    issue_number: int
    label: str | None = None
    chapters: list[int] = []
    is_double: bool = False
    issue_end: int | None = None

    @property
    def row_span(self) -> int:
        if self.issue_end is None:
            return 1
        return self.issue_end - self.issue_number + 1


class YearCalendar(BaseModel):
    """All issues of one calendar year that carried a chapter.

    Attributes:
        year: Calendar year
        issues: Primary issue number -> JumpIssue, ascending
        suppressed: Issue numbers covered by a double issue span tail
    """

    year: int
    issues: dict[int, JumpIssue] = {}
    suppressed: set[int] = set()

    @field_serializer("suppressed")
    def _serialize_suppressed(self, suppressed: set[int]) -> list[int]:
        return sorted(suppressed)

    @property
    def chapter_count(self) -> int:
        return sum(len(issue.chapters) for issue in self.issues.values())


class CalendarReport(BaseModel):
    """Calendar view over a full release list.

    Attributes:
        years: Per-year calendars, ascending by year
        issue_axis: Union of primary issue numbers across all years
        total_chapters: Number of chapters placed on the calendar
        unresolved_chapters: Chapter numbers whose issue could not be resolved
    """

    years: list[YearCalendar] = []
    issue_axis: list[int] = []
    total_chapters: int = 0
    unresolved_chapters: list[int] = []
