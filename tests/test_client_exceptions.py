"""Tests for client and core exception classes."""

from publication_calendar.clients import (
    APIError,
    AuthenticationError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from publication_calendar.exceptions import (
    DuplicateChapterError,
    PublicationCalendarError,
    UnsortedReleasesError,
)


class TestClientError:
    """Tests for the base ClientError exception."""

    def test_instantiation_with_message(self):
        """ClientError stores the error message."""
        error = ClientError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_connection_error_inheritance(self):
        """ConnectionError inherits from ClientError."""
        error = ConnectionError("Network unreachable")

        assert isinstance(error, ClientError)
        assert error.message == "Network unreachable"


class TestAPIErrors:
    """Tests for APIError and its subclasses."""

    def test_api_error_status_code(self):
        """APIError stores message and status code."""
        error = APIError("Server error", status_code=500)

        assert error.message == "Server error"
        assert error.status_code == 500
        assert isinstance(error, ClientError)

    def test_authentication_error_defaults(self):
        """AuthenticationError defaults to 401."""
        error = AuthenticationError()

        assert error.message == "API key rejected"
        assert error.status_code == 401
        assert isinstance(error, APIError)

    def test_authentication_error_forbidden(self):
        """AuthenticationError can carry a 403."""
        error = AuthenticationError("Forbidden", status_code=403)

        assert error.status_code == 403

    def test_rate_limit_error(self):
        """RateLimitError has a default message and status 429."""
        error = RateLimitError()

        assert error.message == "Rate limit exceeded"
        assert error.status_code == 429
        assert isinstance(error, APIError)

    def test_not_found_error(self):
        """NotFoundError accepts a custom message."""
        error = NotFoundError("Table chapter not found")

        assert error.message == "Table chapter not found"
        assert error.status_code == 404


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_instantiation_with_errors(self):
        """ValidationError stores validation error details."""
        errors = ["number must be positive"]
        error = ValidationError("Validation failed", errors=errors)

        assert error.errors == errors
        assert ValidationError("x").errors == []


class TestCoreErrors:
    """Tests for contract violation errors."""

    def test_unsorted_releases_error(self):
        """UnsortedReleasesError names both chapters."""
        error = UnsortedReleasesError(previous=12, current=7)

        assert error.previous == 12
        assert error.current == 7
        assert "chapter 7 follows chapter 12" in error.message
        assert isinstance(error, PublicationCalendarError)
        assert isinstance(error, ValueError)

    def test_duplicate_chapter_error(self):
        """DuplicateChapterError names the repeated chapter."""
        error = DuplicateChapterError(42)

        assert error.number == 42
        assert str(error) == "Duplicate chapter number: 42"
        assert isinstance(error, ValueError)
