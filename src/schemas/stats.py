"""Publication rate statistics schemas."""

from pydantic import BaseModel, Field, computed_field


class YearlyPublicationStats(BaseModel):
    """Publication statistics for one calendar year.

    Attributes:
        year: Calendar year
        chapters_published: Resolved chapters released in the year
        break_weeks: Skipped issues attributed to the year
        first_chapter: Lowest chapter number released in the year
        last_chapter: Highest chapter number released in the year
    """

    year: int
    chapters_published: int = 0
    break_weeks: int = 0
    first_chapter: int | None = None
    last_chapter: int | None = None

    @computed_field
    @property
    def available_weeks(self) -> int:
        return self.chapters_published + self.break_weeks

    @computed_field
    @property
    def publication_rate(self) -> float:
        if self.available_weeks == 0:
            return 1.0
        return self.chapters_published / self.available_weeks


class StreakInfo(BaseModel):
    """Longest run of chapters released without a skipped issue."""

    chapters: int
    from_chapter: int
    to_chapter: int


class PublicationSummary(BaseModel):
    """Totals and highlights across all years.

    ``average_rate`` and ``recent_rate`` are weighted by available weeks,
    not averaged per year.
    """

    total_years: int = 0
    total_chapters: int = 0
    total_breaks: int = 0
    total_weeks: int = 0
    average_rate: float = 0.0
    recent_rate: float = 0.0
    most_published_year: YearlyPublicationStats | None = None
    least_published_year: YearlyPublicationStats | None = None
    most_breaks_year: YearlyPublicationStats | None = None
    least_breaks_year: YearlyPublicationStats | None = None
    longest_streak: StreakInfo | None = None
    unresolved_chapters: int = 0


class PublicationReport(BaseModel):
    """Full output of the rate aggregator.

    Attributes:
        years: Per-year statistics, ascending by year
        summary: Global summary
        unresolved_chapters: Chapter numbers with unresolved release metadata
        anomalies: Ordering anomalies reported by the break calculator
    """

    years: list[YearlyPublicationStats] = []
    summary: PublicationSummary = Field(default_factory=PublicationSummary)
    unresolved_chapters: list[int] = []
    anomalies: list[str] = []
