"""Client for fetching chapter release rows."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.release import ChapterRow

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class ChapterReleaseClient(Client):
    """Client for the ``chapter`` table of the hosted release database.

    Reads the chapter number, release date and issue tag of every chapter,
    ordered by chapter number, paging through the table with limit/offset.

    Example:
        config = {"base_url": "https://xyz.supabase.co", "api_key": "..."}
        with ChapterReleaseClient(config) as client:
            rows = client.fetch()
    """

    TABLE_PATH = "/rest/v1/chapter"
    SELECT_COLUMNS = "number,date,jump"
    DEFAULT_PAGE_SIZE = 1000

    @property
    def page_size(self) -> int:
        return int(self._config.get("page_size", self.DEFAULT_PAGE_SIZE))

    def fetch(
        self,
        limit: int | None = None,
        validate: bool = True,
    ) -> list[ChapterRow] | list[dict[str, Any]]:
        """Fetch chapter release rows.

        Args:
            limit: Maximum number of rows to return. If None, fetches all.
            validate: If True, validate rows against the ChapterRow schema

        Returns:
            List of ChapterRow objects if validate=True, otherwise list of dicts

        Raises:
            ValidationError: If validate=True and a row fails schema validation
            APIError: If the API returns a non-2xx response
            ConnectionError: If the network connection fails
        """
        rows: list[dict[str, Any]] = []
        offset = 0

        while limit is None or len(rows) < limit:
            page_size = self.page_size
            if limit is not None:
                page_size = min(page_size, limit - len(rows))

            response = self.get(
                self.TABLE_PATH,
                params=self._build_params(page_size, offset),
            )
            page = response.json()
            rows.extend(page)
            logger.debug(f"Fetched {len(page)} chapter rows at offset {offset}")

            if len(page) < page_size:
                break
            offset += len(page)

        logger.info(f"Fetched {len(rows)} chapter rows from {self.base_url}")

        if validate:
            return self._validate_rows(rows)
        return rows

    def _build_params(self, page_size: int, offset: int) -> dict[str, Any]:
        """Build PostgREST query parameters for one page."""
        return {
            "select": self.SELECT_COLUMNS,
            "order": "number.asc",
            "limit": page_size,
            "offset": offset,
        }

    def _validate_rows(self, rows: list[dict[str, Any]]) -> list[ChapterRow]:
        """Validate raw rows against the ChapterRow schema.

        Raises:
            ValidationError: If any row fails validation
        """
        validated: list[ChapterRow] = []

        for i, row in enumerate(rows):
            try:
                validated.append(ChapterRow.model_validate(row))
            except PydanticValidationError as e:
                row_id = row.get("number", f"index {i}")
                raise ValidationError(
                    f"Chapter row {row_id} failed validation",
                    errors=[str(err) for err in e.errors()],
                ) from e

        return validated
