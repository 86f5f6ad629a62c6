"""Custom exceptions for the release data client."""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when the data API cannot be reached."""

    pass


class APIError(ClientError):
    """Raised when the data API returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class AuthenticationError(APIError):
    """Raised when the API key is missing or rejected (401/403)."""

    def __init__(self, message: str = "API key rejected", status_code: int = 401):
        super().__init__(message, status_code=status_code)


class RateLimitError(APIError):
    """Raised when the data API keeps returning 429 after all retries."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """Raised when the requested table does not exist (404)."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationError(ClientError):
    """Raised when a chapter row fails schema validation."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
