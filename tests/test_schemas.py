"""Tests for schema definitions."""

import json

import pytest
from pydantic import ValidationError

from schemas import (
    CalendarReport,
    ChapterReleaseRecord,
    ChapterRow,
    IssueRef,
    JumpIssue,
    PublicationReport,
    YearCalendar,
    YearlyPublicationStats,
)


class TestChapterRow:
    """Tests for ChapterRow Pydantic model."""

    def test_accepts_table_column_names(self):
        """ChapterRow reads the 'jump' and 'date' columns."""
        row = ChapterRow.model_validate(
            {"number": 1, "jump": "1997 Issue 34", "date": "1997-07-22"}
        )

        assert row.issue_tag == "1997 Issue 34"
        assert row.release_date == "1997-07-22"

    def test_accepts_field_names(self):
        """ChapterRow can be populated by field name."""
        row = ChapterRow(number=1, issue_tag="12", release_date="2003-03-10")

        assert row.issue_tag == "12"

    def test_optional_fields(self):
        """Tag and date may be missing."""
        row = ChapterRow(number=3)

        assert row.issue_tag is None
        assert row.release_date is None

    def test_allows_extra_columns(self):
        """Extra table columns are kept but not required."""
        row = ChapterRow.model_validate({"number": 1, "title": "Romance Dawn"})

        assert row.model_extra["title"] == "Romance Dawn"

    def test_rejects_non_positive_number(self):
        """Chapter numbers are positive."""
        with pytest.raises(ValidationError):
            ChapterRow(number=0)


class TestIssueRef:
    """Tests for IssueRef."""

    def test_single_issue(self):
        """IssueRef without an end is a single issue."""
        ref = IssueRef(year=2024, issue=5)

        assert ref.issue_end is None

    def test_rejects_reversed_span(self):
        """issue_end must be greater than issue."""
        with pytest.raises(ValidationError):
            IssueRef(year=2024, issue=5, issue_end=5)


class TestChapterReleaseRecord:
    """Tests for ChapterReleaseRecord invariants."""

    def test_resolved_single(self):
        """A resolved single-issue record has no span."""
        record = ChapterReleaseRecord(number=1, year=2000, issue=4)

        assert record.resolved
        assert not record.is_double
        assert record.span == 0
        assert record.last_issue == 4

    def test_resolved_double(self):
        """A double issue record spans its extra numbers."""
        record = ChapterReleaseRecord(number=1, year=2000, issue=37, issue_end=38)

        assert record.is_double
        assert record.span == 1
        assert record.last_issue == 38

    def test_unresolved(self):
        """A record with neither year nor issue is unresolved."""
        record = ChapterReleaseRecord(number=1, raw_tag="???")

        assert not record.resolved
        assert record.span == 0
        assert record.last_issue is None

    @pytest.mark.parametrize(
        "fields",
        [
            {"year": 2000},
            {"issue": 4},
            {"issue_end": 5},
            {"year": 2000, "issue": 5, "issue_end": 4},
        ],
    )
    def test_rejects_partial_or_invalid(self, fields):
        """Partial parses and reversed spans are rejected."""
        with pytest.raises(ValidationError):
            ChapterReleaseRecord(number=1, **fields)

    def test_from_row_without_ref(self):
        """from_row() with no reference keeps the record unresolved."""
        row = ChapterRow(number=9, jump="Special", date=None)

        record = ChapterReleaseRecord.from_row(row, None)

        assert record.raw_tag == "Special"
        assert not record.resolved


class TestJumpIssue:
    """Tests for JumpIssue."""

    def test_row_span(self):
        """row_span covers every nominal number of a double issue."""
        single = JumpIssue(year=2000, issue_number=4, chapters=[10])
        double = JumpIssue(
            year=2000, issue_number=37, chapters=[11], is_double=True, issue_end=38
        )

        assert single.row_span == 1
        assert double.row_span == 2


class TestYearCalendar:
    """Tests for YearCalendar serialization."""

    def test_suppressed_serializes_sorted(self):
        """The suppressed set serializes as a sorted list."""
        calendar = YearCalendar(year=2000, suppressed={40, 38, 39})

        data = json.loads(calendar.model_dump_json())

        assert data["suppressed"] == [38, 39, 40]

    def test_report_round_trip(self):
        """A CalendarReport survives JSON serialization."""
        calendar = YearCalendar(
            year=2000,
            issues={
                37: JumpIssue(
                    year=2000, issue_number=37, chapters=[1], is_double=True, issue_end=38
                )
            },
            suppressed={38},
        )
        report = CalendarReport(years=[calendar], issue_axis=[37], total_chapters=1)

        restored = CalendarReport.model_validate_json(report.model_dump_json())

        assert restored.years[0].issues[37].issue_end == 38
        assert restored.years[0].suppressed == {38}


class TestYearlyPublicationStats:
    """Tests for YearlyPublicationStats derived fields."""

    def test_available_weeks_and_rate(self):
        """available_weeks is chapters plus breaks; rate is their ratio."""
        stats = YearlyPublicationStats(year=2000, chapters_published=51, break_weeks=1)

        assert stats.available_weeks == 52
        assert stats.publication_rate == pytest.approx(51 / 52)

    def test_zero_weeks_rate(self):
        """A year with no weeks has a rate of 1.0 instead of dividing by zero."""
        stats = YearlyPublicationStats(year=2000)

        assert stats.available_weeks == 0
        assert stats.publication_rate == 1.0

    def test_computed_fields_serialize(self):
        """Derived fields are included in dumps."""
        stats = YearlyPublicationStats(year=2000, chapters_published=3, break_weeks=1)

        data = stats.model_dump()

        assert data["available_weeks"] == 4
        assert data["publication_rate"] == 0.75


class TestPublicationReport:
    """Tests for PublicationReport defaults."""

    def test_empty_report(self):
        """An empty report has a zero summary."""
        report = PublicationReport()

        assert report.years == []
        assert report.summary.total_years == 0
        assert report.summary.average_rate == 0.0
        assert report.summary.longest_streak is None
