"""Resolve raw chapter rows into release records."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from publication_calendar.config import DEFAULT_CONFIG, AnalysisConfig
from publication_calendar.exceptions import DuplicateChapterError
from schemas.release import ChapterReleaseRecord, ChapterRow

from .issue_tag import parse_issue_tag

logger = logging.getLogger(__name__)


@dataclass
class ResolvedReleases:
    """Release records ordered by chapter number, with resolution diagnostics.

    Attributes:
        records: One record per input row, ascending by chapter number
        unresolved: Chapter numbers whose issue tag could not be resolved
    """

    records: list[ChapterReleaseRecord] = field(default_factory=list)
    unresolved: list[int] = field(default_factory=list)

    @property
    def resolved(self) -> list[ChapterReleaseRecord]:
        return [record for record in self.records if record.resolved]


def resolve_release(
    row: ChapterRow, config: AnalysisConfig = DEFAULT_CONFIG
) -> ChapterReleaseRecord:
    """Parse one row's issue tag into a release record."""
    ref = parse_issue_tag(row.issue_tag, row.release_date, config)
    return ChapterReleaseRecord.from_row(row, ref)


def resolve_releases(
    rows: Iterable[ChapterRow | Mapping[str, Any]],
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> ResolvedReleases:
    """Resolve every row and order the results by chapter number.

    Args:
        rows: ChapterRow objects or raw mappings with ``number``, ``jump``
            and ``date`` keys
        config: Analysis constants

    Returns:
        ResolvedReleases with all records and the unresolved chapter numbers

    Raises:
        DuplicateChapterError: If a chapter number appears more than once
    """
    records: list[ChapterReleaseRecord] = []
    seen: set[int] = set()

    for row in rows:
        if not isinstance(row, ChapterRow):
            row = ChapterRow.model_validate(row)
        if row.number in seen:
            raise DuplicateChapterError(row.number)
        seen.add(row.number)
        records.append(resolve_release(row, config))

    records.sort(key=lambda record: record.number)

    unresolved = [record.number for record in records if not record.resolved]
    for number in unresolved:
        logger.debug(f"Chapter {number}: unresolved release metadata")
    if unresolved:
        logger.warning(
            f"{len(unresolved)} chapters with unresolved release metadata"
        )

    logger.info(
        f"Resolved {len(records) - len(unresolved)} of {len(records)} chapter releases"
    )
    return ResolvedReleases(records=records, unresolved=unresolved)
