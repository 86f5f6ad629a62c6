"""Base class for release compilers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel

from publication_calendar.config import DEFAULT_CONFIG, AnalysisConfig
from schemas.release import ChapterReleaseRecord


class Compiler(ABC):
    """Abstract base class for release compilers.

    Compilers derive a read-only view from a list of release records. They
    hold no state beyond their configuration, so one instance can be reused
    across calls and threads.
    """

    def __init__(self, config: AnalysisConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def compile(self, records: Sequence[ChapterReleaseRecord]) -> BaseModel:
        """Compile a report from release records.

        Args:
            records: Release records, resolved or not

        Returns:
            A serializable report model
        """
        pass
