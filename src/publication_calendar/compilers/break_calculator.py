"""Break calculator for skipped periodical issues.

Walks consecutive resolved releases in chapter order and counts the
nominal issue numbers between them that carried no chapter. A pair that
crosses New Year is split: the weeks left in the old year go to the old
year, the weeks before the new release go to the new year.

Issue numbering conventions:
    - A double issue ``N-M`` consumes ``M - N`` extra nominal numbers.
    - The very next issue after a release is expected, not a break.
    - The skipped issue number (53) never carries a release and is never
      counted, and is excluded at most once per pair. Within a year it is
      subtracted when it lies strictly between the previous release's last
      occupied number and the current issue. Across New Year the old
      year's tally already stops at the last regular issue (52).
"""

import logging
from collections.abc import Sequence

from publication_calendar.exceptions import DuplicateChapterError, UnsortedReleasesError
from schemas.breaks import BreakReport, ReleaseGap
from schemas.release import ChapterReleaseRecord

from .compiler import Compiler

logger = logging.getLogger(__name__)


class BreakCalculator(Compiler):
    """Attribute skipped issues to calendar years.

    Records must be sorted strictly ascending by chapter number; chapter
    order tracks release order. Unresolved records are ignored, so a pair
    is formed by the nearest resolved neighbours.
    """

    def compile(self, records: Sequence[ChapterReleaseRecord]) -> BreakReport:
        """Compute per-year break weeks and per-pair gaps.

        Args:
            records: Release records sorted ascending by chapter number

        Returns:
            BreakReport with yearly tallies, pair gaps and anomalies

        Raises:
            UnsortedReleasesError: If records are out of chapter order
            DuplicateChapterError: If a chapter number repeats
        """
        check_sorted(records)
        resolved = [record for record in records if record.resolved]

        yearly: dict[int, int] = {record.year: 0 for record in resolved}
        gaps: list[ReleaseGap] = []
        anomalies: list[str] = []

        for previous, current in zip(resolved, resolved[1:]):
            gap = self.measure(previous, current)
            gaps.append(gap)
            if gap.anomaly:
                anomalies.append(gap.anomaly)
                logger.warning(gap.anomaly)
            for year, weeks in gap.attributed.items():
                yearly[year] += weeks

        yearly_breaks = dict(sorted(yearly.items()))
        logger.info(
            f"Counted {sum(yearly_breaks.values())} break weeks across "
            f"{len(yearly_breaks)} years ({len(anomalies)} anomalies)"
        )

        return BreakReport(yearly_breaks=yearly_breaks, gaps=gaps, anomalies=anomalies)

    def measure(
        self, previous: ChapterReleaseRecord, current: ChapterReleaseRecord
    ) -> ReleaseGap:
        """Measure the skipped issues between two consecutive resolved releases."""
        if current.year == previous.year:
            return self._same_year_gap(previous, current)
        if current.year == previous.year + 1:
            return self._year_transition_gap(previous, current)

        return ReleaseGap(
            previous_chapter=previous.number,
            current_chapter=current.number,
            counted=False,
            anomaly=(
                f"Chapter {current.number} ({_describe(current)}) jumps from "
                f"{previous.year} to {current.year} after chapter "
                f"{previous.number} ({_describe(previous)}); pair skipped"
            ),
        )

    def _same_year_gap(
        self, previous: ChapterReleaseRecord, current: ChapterReleaseRecord
    ) -> ReleaseGap:
        weeks = current.issue - previous.issue - previous.span - 1
        if self._crosses_skipped_issue(previous, current):
            weeks -= 1

        anomaly = None
        moved_back = current.issue < previous.issue
        inside_span = previous.issue < current.issue <= previous.last_issue
        if moved_back or inside_span:
            anomaly = (
                f"Chapter {current.number} ({_describe(current)}) does not follow "
                f"chapter {previous.number} ({_describe(previous)}); gap clamped to 0"
            )

        weeks = max(0, weeks)
        return ReleaseGap(
            previous_chapter=previous.number,
            current_chapter=current.number,
            weeks_skipped=weeks,
            attributed={current.year: weeks} if weeks else {},
            anomaly=anomaly,
        )

    def _year_transition_gap(
        self, previous: ChapterReleaseRecord, current: ChapterReleaseRecord
    ) -> ReleaseGap:
        last_regular = self.config.issues_per_year
        before = max(0, last_regular - previous.issue - previous.span - 1)
        after = max(0, current.issue - 1)

        attributed = {}
        if before:
            attributed[previous.year] = before
        if after:
            attributed[current.year] = after

        return ReleaseGap(
            previous_chapter=previous.number,
            current_chapter=current.number,
            weeks_skipped=before + after,
            attributed=attributed,
        )

    def _crosses_skipped_issue(
        self, previous: ChapterReleaseRecord, current: ChapterReleaseRecord
    ) -> bool:
        skipped = self.config.skipped_issue_number
        if skipped is None:
            return False
        return previous.last_issue < skipped < current.issue


def check_sorted(records: Sequence[ChapterReleaseRecord]) -> None:
    """Raise if records are not strictly ascending by chapter number."""
    for previous, current in zip(records, records[1:]):
        if current.number == previous.number:
            raise DuplicateChapterError(current.number)
        if current.number < previous.number:
            raise UnsortedReleasesError(previous.number, current.number)


def compute_yearly_breaks(records: Sequence[ChapterReleaseRecord]) -> dict[int, int]:
    """Per-year break weeks with the default configuration."""
    return BreakCalculator().compile(records).yearly_breaks


def _describe(record: ChapterReleaseRecord) -> str:
    if record.issue_end is not None:
        return f"{record.year} issue {record.issue}-{record.issue_end}"
    return f"{record.year} issue {record.issue}"
