"""Calendar builder for the year by issue release grid.

Groups resolved releases by year and nominal issue number. Each group
becomes a JumpIssue; a double issue additionally marks the nominal numbers
in its span tail as suppressed so the grid shows one merged cell.
"""

import logging
from collections.abc import Iterable, Sequence

from schemas.calendar import CalendarReport, JumpIssue, YearCalendar
from schemas.release import ChapterReleaseRecord

from .compiler import Compiler

logger = logging.getLogger(__name__)


class CalendarBuilder(Compiler):
    """Build per-year publication calendars from release records.

    Unresolved records are left off the calendar; the break calculator is
    responsible for accounting for them.

    Example:
        builder = CalendarBuilder()
        report = builder.compile(resolve_releases(rows).records)
        for year in report.years:
            print(year.year, sorted(year.issues))
    """

    def compile(self, records: Sequence[ChapterReleaseRecord]) -> CalendarReport:
        """Build the calendar report for a release list.

        Args:
            records: Release records in any order

        Returns:
            CalendarReport with per-year calendars and the shared issue axis
        """
        years = self.build(records)
        unresolved = sorted(record.number for record in records if not record.resolved)
        total = sum(year.chapter_count for year in years)

        logger.info(
            f"Built calendar for {len(years)} years with {total} chapters"
        )

        return CalendarReport(
            years=years,
            issue_axis=issue_axis(years),
            total_chapters=total,
            unresolved_chapters=unresolved,
        )

    def build(self, records: Iterable[ChapterReleaseRecord]) -> list[YearCalendar]:
        """Group resolved records into year calendars, ascending by year."""
        resolved = sorted(
            (record for record in records if record.resolved),
            key=lambda record: record.number,
        )

        grouped: dict[int, dict[int, list[ChapterReleaseRecord]]] = {}
        for record in resolved:
            grouped.setdefault(record.year, {}).setdefault(record.issue, []).append(record)

        return [self._build_year(year, grouped[year]) for year in sorted(grouped)]

    def _build_year(
        self, year: int, groups: dict[int, list[ChapterReleaseRecord]]
    ) -> YearCalendar:
        """Build one year's calendar from its issue groups."""
        issues: dict[int, JumpIssue] = {}
        suppressed: set[int] = set()
        covered_by: dict[int, int] = {}

        for issue_number in sorted(groups):
            group = groups[issue_number]
            chapters = [record.number for record in group]

            if issue_number in suppressed:
                # Already inside an earlier double issue's span
                host = issues[covered_by[issue_number]]
                host.chapters = sorted(host.chapters + chapters)
                logger.warning(
                    f"{year} issue {issue_number} overlaps double issue "
                    f"{host.issue_number}-{host.issue_end}; "
                    f"merged chapters {chapters}"
                )
                continue

            representative = group[0]
            issues[issue_number] = JumpIssue(
                year=year,
                issue_number=issue_number,
                label=representative.raw_tag,
                chapters=chapters,
                is_double=representative.is_double,
                issue_end=representative.issue_end,
            )

            if representative.issue_end is not None:
                for spanned in range(issue_number + 1, representative.issue_end + 1):
                    suppressed.add(spanned)
                    covered_by[spanned] = issue_number

        logger.debug(
            f"{year}: {len(issues)} issues, {len(suppressed)} suppressed by double issues"
        )
        return YearCalendar(year=year, issues=issues, suppressed=suppressed)


def issue_axis(calendars: Iterable[YearCalendar]) -> list[int]:
    """Sorted union of the primary issue numbers across all years."""
    numbers: set[int] = set()
    for calendar in calendars:
        numbers.update(calendar.issues)
    return sorted(numbers)


def build_calendar(records: Sequence[ChapterReleaseRecord]) -> list[YearCalendar]:
    """Build per-year calendars with the default configuration."""
    return CalendarBuilder().build(records)
