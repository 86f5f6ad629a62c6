"""Break (skipped issue) schemas."""

from pydantic import BaseModel


class ReleaseGap(BaseModel):
    """Skipped issues between two consecutive resolved releases.

    Attributes:
        previous_chapter: Chapter number of the earlier release
        current_chapter: Chapter number of the later release
        weeks_skipped: Total skipped issues between the two (never negative)
        attributed: Year -> skipped issues credited to that year
        counted: False when the pair was left out of the tallies
        anomaly: Description of an ordering irregularity, if any
    """

    previous_chapter: int
    current_chapter: int
    weeks_skipped: int = 0
    attributed: dict[int, int] = {}
    counted: bool = True
    anomaly: str | None = None


class BreakReport(BaseModel):
    """Per-year break tallies with the pair-level detail behind them.

    Attributes:
        yearly_breaks: Year -> break weeks, ascending by year
        gaps: One entry per consecutive pair of resolved releases
        anomalies: Descriptions of clamped or skipped pairs
    """

    yearly_breaks: dict[int, int] = {}
    gaps: list[ReleaseGap] = []
    anomalies: list[str] = []

    @property
    def total_breaks(self) -> int:
        return sum(self.yearly_breaks.values())
