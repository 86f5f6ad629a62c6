"""Pytest fixtures for publication calendar tests."""

import json

import pytest

from schemas.release import ChapterReleaseRecord


@pytest.fixture
def make_record():
    """Factory for resolved or unresolved release records."""

    def _make(number, year=None, issue=None, issue_end=None, raw_tag=None, raw_date=None):
        return ChapterReleaseRecord(
            number=number,
            year=year,
            issue=issue,
            issue_end=issue_end,
            raw_tag=raw_tag,
            raw_date=raw_date,
        )

    return _make


@pytest.fixture
def year_missing_issue_10(make_record):
    """One 2000 release per issue 1..52 except issue 10."""
    records = []
    number = 1
    for issue in range(1, 53):
        if issue == 10:
            continue
        records.append(make_record(number, 2000, issue, raw_tag=f"2000 Issue {issue}"))
        number += 1
    return records


@pytest.fixture
def year_with_double_issue(make_record):
    """A 2001 release per issue 1..52 with issues 37 and 38 merged."""
    records = []
    number = 1
    for issue in range(1, 53):
        if issue == 38:
            continue
        if issue == 37:
            records.append(
                make_record(number, 2001, 37, issue_end=38, raw_tag="2001 Issue 37-38")
            )
        else:
            records.append(make_record(number, 2001, issue, raw_tag=f"2001 Issue {issue}"))
        number += 1
    return records


@pytest.fixture
def sample_chapter_rows():
    """Raw chapter rows in the shape stored by the chapter table."""
    return [
        {"number": 1, "jump": "1997 Issue 34", "date": "1997-07-22"},
        {"number": 2, "jump": "1997 Issue 36", "date": "1997-08-04"},
        {"number": 3, "jump": "1997 Issue 37-38", "date": "1997-08-11"},
        {"number": 4, "jump": "1997-39", "date": "1997-08-25"},
        {"number": 5, "jump": "40", "date": "1997-09-01"},
        {"number": 6, "jump": "51", "date": "1997-12-01"},
        {"number": 7, "jump": "2", "date": "1998-01-05"},
        {"number": 8, "jump": "Special Edition", "date": None},
        {"number": 9, "jump": None, "date": None},
        {"number": 10, "jump": "1998/3", "date": "1998-01-12"},
    ]


@pytest.fixture
def sample_releases_file(tmp_path, sample_chapter_rows):
    """Write the sample chapter rows to a JSON file."""
    path = tmp_path / "chapter-releases.json"
    path.write_text(json.dumps(sample_chapter_rows, indent=2))
    return path
