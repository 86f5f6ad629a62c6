"""Schema definitions for the publication calendar."""

from .breaks import BreakReport, ReleaseGap
from .calendar import CalendarReport, JumpIssue, YearCalendar
from .release import ChapterReleaseRecord, ChapterRow, IssueRef
from .stats import (
    PublicationReport,
    PublicationSummary,
    StreakInfo,
    YearlyPublicationStats,
)

__all__ = [
    "BreakReport",
    "CalendarReport",
    "ChapterReleaseRecord",
    "ChapterRow",
    "IssueRef",
    "JumpIssue",
    "PublicationReport",
    "PublicationSummary",
    "ReleaseGap",
    "StreakInfo",
    "YearCalendar",
    "YearlyPublicationStats",
]
