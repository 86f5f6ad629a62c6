"""Chapter release schemas.

A release row arrives from the chapter table with a free-text periodical
issue tag (the ``jump`` column) and an optional release date. The parser
normalizes the tag into an IssueRef, and the pair is carried forward as a
ChapterReleaseRecord.
"""

from pydantic import BaseModel, Field, PositiveInt, model_validator


class ChapterRow(BaseModel):
    """A raw chapter row as stored in the chapter table.

    Attributes:
        number: Chapter number (unique, assigned in publication order)
        issue_tag: Free-text periodical issue label (e.g. "1997 Issue 37-38")
        release_date: Release date string, used as a year fallback
    """

    number: PositiveInt
    issue_tag: str | None = Field(default=None, alias="jump")
    release_date: str | None = Field(default=None, alias="date")

    model_config = {"extra": "allow", "populate_by_name": True}


class IssueRef(BaseModel):
    """A normalized periodical issue reference.

    Attributes:
        year: Calendar year of the issue
        issue: Nominal issue number within the year
        issue_end: Last nominal issue number covered by a double issue
    """

    year: int
    issue: int
    issue_end: int | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_span(self) -> "IssueRef":
        if self.issue_end is not None and self.issue_end <= self.issue:
            raise ValueError(
                f"issue_end ({self.issue_end}) must be greater than issue ({self.issue})"
            )
        return self


class ChapterReleaseRecord(BaseModel):
    """One published chapter with its resolved issue reference.

    ``year`` and ``issue`` are either both known or both None; a record
    never carries a partial parse.

    Attributes:
        number: Chapter number
        raw_tag: Original issue tag
        raw_date: Original release date
        year: Calendar year of the containing issue
        issue: Nominal issue number within ``year``
        issue_end: Second nominal number of a double issue
    """

    number: PositiveInt
    raw_tag: str | None = None
    raw_date: str | None = None
    year: int | None = None
    issue: int | None = None
    issue_end: int | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_resolution(self) -> "ChapterReleaseRecord":
        if (self.year is None) != (self.issue is None):
            raise ValueError("year and issue must both be set or both be None")
        if self.issue_end is not None:
            if self.issue is None:
                raise ValueError("issue_end requires a resolved issue")
            if self.issue_end <= self.issue:
                raise ValueError(
                    f"issue_end ({self.issue_end}) must be greater than issue ({self.issue})"
                )
        return self

    @classmethod
    def from_row(cls, row: ChapterRow, ref: IssueRef | None) -> "ChapterReleaseRecord":
        """Combine a raw row with its parse result (None when unresolved)."""
        if ref is None:
            return cls(
                number=row.number,
                raw_tag=row.issue_tag,
                raw_date=row.release_date,
            )
        return cls(
            number=row.number,
            raw_tag=row.issue_tag,
            raw_date=row.release_date,
            year=ref.year,
            issue=ref.issue,
            issue_end=ref.issue_end,
        )

    @property
    def resolved(self) -> bool:
        return self.year is not None and self.issue is not None

    @property
    def is_double(self) -> bool:
        return self.issue_end is not None

    @property
    def span(self) -> int:
        """Number of extra nominal issues consumed by a double issue."""
        if self.issue_end is None or self.issue is None:
            return 0
        return self.issue_end - self.issue

    @property
    def last_issue(self) -> int | None:
        """Last nominal issue number occupied by this release."""
        if self.issue_end is not None:
            return self.issue_end
        return self.issue
