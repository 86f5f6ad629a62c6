"""Rate aggregator for yearly publication statistics."""

import logging
from collections.abc import Sequence

from publication_calendar.compilers import BreakCalculator, CalendarBuilder
from publication_calendar.config import DEFAULT_CONFIG, AnalysisConfig
from schemas.breaks import BreakReport, ReleaseGap
from schemas.calendar import YearCalendar
from schemas.release import ChapterReleaseRecord
from schemas.stats import (
    PublicationReport,
    PublicationSummary,
    StreakInfo,
    YearlyPublicationStats,
)

logger = logging.getLogger(__name__)


class RateAggregator:
    """Combine calendar chapter counts with break counts into yearly rates.

    The aggregator sorts its input by chapter number, runs the calendar
    builder and the break calculator over the same records, and joins their
    results per year. ``available_weeks`` is always chapters plus breaks.

    Example:
        releases = resolve_releases(rows)
        report = RateAggregator().report(releases.records)
        print(f"{report.summary.average_rate:.1%}")
    """

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        calendar_builder: CalendarBuilder | None = None,
        break_calculator: BreakCalculator | None = None,
    ):
        """Initialize the rate aggregator.

        Args:
            config: Analysis constants (default: DEFAULT_CONFIG)
            calendar_builder: Optional CalendarBuilder for dependency injection
            break_calculator: Optional BreakCalculator for dependency injection
        """
        self.config = config or DEFAULT_CONFIG
        self.calendar_builder = calendar_builder or CalendarBuilder(self.config)
        self.break_calculator = break_calculator or BreakCalculator(self.config)

    def aggregate(
        self, records: Sequence[ChapterReleaseRecord]
    ) -> list[YearlyPublicationStats]:
        """Per-year publication statistics, ascending by year."""
        return self.report(records).years

    def report(self, records: Sequence[ChapterReleaseRecord]) -> PublicationReport:
        """Build the full publication report.

        Args:
            records: Release records, resolved or not, in any order

        Returns:
            PublicationReport with yearly statistics, summary and diagnostics
        """
        ordered = sorted(records, key=lambda record: record.number)
        calendars = self.calendar_builder.build(ordered)
        breaks = self.break_calculator.compile(ordered)

        years = self._join(calendars, breaks)
        unresolved = [record.number for record in ordered if not record.resolved]
        resolved = [record for record in ordered if record.resolved]

        summary = self.summarize(years, resolved, breaks.gaps)
        summary.unresolved_chapters = len(unresolved)

        logger.info(
            f"Aggregated {summary.total_chapters} chapters and "
            f"{summary.total_breaks} breaks over {summary.total_years} years"
        )

        return PublicationReport(
            years=years,
            summary=summary,
            unresolved_chapters=unresolved,
            anomalies=breaks.anomalies,
        )

    def summarize(
        self,
        years: list[YearlyPublicationStats],
        resolved: Sequence[ChapterReleaseRecord] = (),
        gaps: Sequence[ReleaseGap] = (),
    ) -> PublicationSummary:
        """Summarize yearly statistics.

        Rates are weighted by available weeks. Extreme years are chosen from
        the years strictly between the first and the last, since those two
        are partial; with fewer than three years there are none.

        Args:
            years: Yearly statistics, ascending by year
            resolved: Resolved records in chapter order (for the streak)
            gaps: Pair gaps aligned with ``resolved``

        Returns:
            PublicationSummary (all zero when there is no data)
        """
        if not years:
            return PublicationSummary()

        recent = years[-self.config.recent_years_window:]
        inner = years[1:-1] if len(years) >= 3 else []

        return PublicationSummary(
            total_years=len(years),
            total_chapters=sum(year.chapters_published for year in years),
            total_breaks=sum(year.break_weeks for year in years),
            total_weeks=sum(year.available_weeks for year in years),
            average_rate=weighted_rate(years),
            recent_rate=weighted_rate(recent),
            most_published_year=max(inner, key=lambda y: y.chapters_published, default=None),
            least_published_year=min(inner, key=lambda y: y.chapters_published, default=None),
            most_breaks_year=max(inner, key=lambda y: y.break_weeks, default=None),
            least_breaks_year=min(inner, key=lambda y: y.break_weeks, default=None),
            longest_streak=longest_streak(resolved, gaps),
        )

    def _join(
        self, calendars: list[YearCalendar], breaks: BreakReport
    ) -> list[YearlyPublicationStats]:
        """Join calendar chapter counts with yearly break counts."""
        chapters_by_year: dict[int, list[int]] = {}
        for calendar in calendars:
            numbers = chapters_by_year.setdefault(calendar.year, [])
            for issue in calendar.issues.values():
                numbers.extend(issue.chapters)

        stats: list[YearlyPublicationStats] = []
        for year in sorted(set(chapters_by_year) | set(breaks.yearly_breaks)):
            numbers = chapters_by_year.get(year, [])
            entry = YearlyPublicationStats(
                year=year,
                chapters_published=len(numbers),
                break_weeks=breaks.yearly_breaks.get(year, 0),
                first_chapter=min(numbers, default=None),
                last_chapter=max(numbers, default=None),
            )
            if entry.available_weeks == 0:
                logger.debug(f"{year}: no available weeks, excluded")
                continue
            stats.append(entry)
        return stats


def weighted_rate(years: Sequence[YearlyPublicationStats]) -> float:
    """Chapters over available weeks across years (0.0 when there are no weeks)."""
    weeks = sum(year.available_weeks for year in years)
    if weeks == 0:
        return 0.0
    return sum(year.chapters_published for year in years) / weeks


def longest_streak(
    resolved: Sequence[ChapterReleaseRecord], gaps: Sequence[ReleaseGap]
) -> StreakInfo | None:
    """Longest run of consecutive releases with no skipped week.

    A pair with any skipped week, or one left out of the tallies, ends the
    current run.
    """
    if not resolved:
        return None

    best_length, best_start, best_end = 1, 0, 0
    length, start = 1, 0
    for index, gap in enumerate(gaps, start=1):
        if gap.counted and gap.weeks_skipped == 0:
            length += 1
            if length > best_length:
                best_length, best_start, best_end = length, start, index
        else:
            length, start = 1, index

    return StreakInfo(
        chapters=best_length,
        from_chapter=resolved[best_start].number,
        to_chapter=resolved[best_end].number,
    )


def aggregate(records: Sequence[ChapterReleaseRecord]) -> list[YearlyPublicationStats]:
    """Per-year publication statistics with the default configuration."""
    return RateAggregator().aggregate(records)
