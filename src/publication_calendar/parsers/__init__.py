"""Parsers for raw chapter release data."""

from .issue_tag import MATCHERS, IssueTagMatcher, parse_issue_tag, year_from_date
from .releases import ResolvedReleases, resolve_release, resolve_releases

__all__ = [
    "IssueTagMatcher",
    "MATCHERS",
    "ResolvedReleases",
    "parse_issue_tag",
    "resolve_release",
    "resolve_releases",
    "year_from_date",
]
