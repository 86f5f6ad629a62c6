"""Parse free-text periodical issue tags.

Release tags in the chapter table were entered by hand over many years and
use several encodings for "which issue carried this chapter". Each encoding
is handled by its own IssueTagMatcher; matchers are tried in priority order
and the first one whose pattern fits the tag decides the result. The
double-issue forms come first so "37-38" is never read as two numbers.

Parsing is pure: malformed tags produce None, never an exception.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from publication_calendar.config import DEFAULT_CONFIG, AnalysisConfig
from schemas.release import IssueRef

_DASH = r"\s*[-–]\s*"

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
)


@dataclass(frozen=True)
class IssueTagMatcher:
    """One recognized issue tag encoding.

    Attributes:
        name: Short identifier for the encoding
        pattern: Regular expression matched against the whole stripped tag
        year_in_tag: Whether the pattern captures the year itself; if not,
            the year comes from the release date
    """

    name: str
    pattern: re.Pattern
    year_in_tag: bool

    def fullmatch(self, tag: str) -> re.Match | None:
        return self.pattern.fullmatch(tag)

    def resolve(
        self,
        match: re.Match,
        release_date: str | None,
        config: AnalysisConfig = DEFAULT_CONFIG,
    ) -> IssueRef | None:
        """Build an IssueRef from a pattern match, or None if it is not valid."""
        if self.year_in_tag:
            year = int(match.group("year"))
        else:
            year = year_from_date(release_date)
        if year is None or year < 1:
            return None

        issue = int(match.group("issue"))
        end = match.groupdict().get("end")
        issue_end = int(end) if end is not None else None

        if not 1 <= issue <= config.max_issue_number:
            return None
        if issue_end is not None:
            if issue_end <= issue or issue_end > config.max_issue_number:
                return None

        return IssueRef(year=year, issue=issue, issue_end=issue_end)


MATCHERS: tuple[IssueTagMatcher, ...] = (
    IssueTagMatcher(
        name="year-issue-double",
        pattern=re.compile(
            rf"(?P<year>\d{{4}})\s+issue\s+(?P<issue>\d+){_DASH}(?P<end>\d+)",
            re.IGNORECASE,
        ),
        year_in_tag=True,
    ),
    IssueTagMatcher(
        name="year-issue",
        pattern=re.compile(r"(?P<year>\d{4})\s+issue\s+(?P<issue>\d+)", re.IGNORECASE),
        year_in_tag=True,
    ),
    IssueTagMatcher(
        name="year-compact",
        pattern=re.compile(r"(?P<year>\d{4})\s*[-/–]\s*(?P<issue>\d{1,3})"),
        year_in_tag=True,
    ),
    IssueTagMatcher(
        name="bare-double",
        pattern=re.compile(rf"(?P<issue>\d{{1,3}})(?:{_DASH}|\s*&\s*)(?P<end>\d{{1,3}})"),
        year_in_tag=False,
    ),
    IssueTagMatcher(
        name="bare-issue",
        pattern=re.compile(r"(?P<issue>\d{1,3})"),
        year_in_tag=False,
    ),
)


def year_from_date(raw_date: str | None) -> int | None:
    """Extract the calendar year from a release date string.

    Args:
        raw_date: Date string in one of DATE_FORMATS

    Returns:
        The year, or None if the date is missing or unparseable

    Examples:
        >>> year_from_date("2003-03-10")
        2003
        >>> year_from_date("March 10, 2003")
        2003
        >>> year_from_date("soon") is None
        True
    """
    if not raw_date:
        return None
    value = raw_date.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).year
        except ValueError:
            continue
    try:
        return date.fromisoformat(value[:10]).year
    except ValueError:
        return None


def match_issue_tag(raw_tag: str | None) -> tuple[IssueTagMatcher, re.Match] | None:
    """Return the first matcher whose pattern fits the tag, with its match."""
    if not raw_tag:
        return None
    tag = raw_tag.strip()
    for matcher in MATCHERS:
        match = matcher.fullmatch(tag)
        if match is not None:
            return matcher, match
    return None


def parse_issue_tag(
    raw_tag: str | None,
    raw_date: str | None,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> IssueRef | None:
    """Normalize a raw issue tag into a (year, issue, issue_end) reference.

    The first encoding whose pattern fits the tag decides the outcome. Tags
    without a year take it from ``raw_date``; when that is missing or
    unparseable the parse fails rather than guessing.

    Args:
        raw_tag: Free-text issue label, e.g. "1997 Issue 37-38"
        raw_date: Release date used as the year fallback
        config: Analysis constants (issue number bounds)

    Returns:
        The parsed IssueRef, or None when the tag cannot be resolved

    Examples:
        >>> parse_issue_tag("1997 Issue 37-38", None)
        IssueRef(year=1997, issue=37, issue_end=38)
        >>> parse_issue_tag("12", "2003-03-10")
        IssueRef(year=2003, issue=12, issue_end=None)
        >>> parse_issue_tag(None, None) is None
        True
    """
    found = match_issue_tag(raw_tag)
    if found is None:
        return None
    matcher, match = found
    return matcher.resolve(match, raw_date, config)
