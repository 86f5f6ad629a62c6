"""Domain constants for the publication calendar.

The periodical numbers its issues from 1 each year. Regular years have 52
numbered weeks; issue 53 is a numbering slot that never carries a chapter
of the series, so it is never counted as a skipped week.
"""

from pydantic import BaseModel, PositiveInt

ISSUES_PER_YEAR = 52
SKIPPED_ISSUE_NUMBER = 53
MAX_ISSUE_NUMBER = 100
RECENT_YEARS_WINDOW = 5


class AnalysisConfig(BaseModel):
    """Tunable constants shared by the parser, builder and calculators.

    Attributes:
        issues_per_year: Last regular issue number of a year
        skipped_issue_number: Issue number that never carries a release
        max_issue_number: Largest issue number the parser will accept
        recent_years_window: Number of trailing years used for the recent rate
    """

    issues_per_year: PositiveInt = ISSUES_PER_YEAR
    skipped_issue_number: PositiveInt | None = SKIPPED_ISSUE_NUMBER
    max_issue_number: PositiveInt = MAX_ISSUE_NUMBER
    recent_years_window: PositiveInt = RECENT_YEARS_WINDOW

    model_config = {"frozen": True}


DEFAULT_CONFIG = AnalysisConfig()
