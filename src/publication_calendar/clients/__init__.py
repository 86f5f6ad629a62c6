"""Network clients for the release database."""

from .client import Client
from .exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .release_client import ChapterReleaseClient

__all__ = [
    "Client",
    "ChapterReleaseClient",
    "ClientError",
    "ConnectionError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
]
