"""Errors raised by the content service client."""

from typing import Optional


class ContentServiceError(Exception):
    """Base class for content service failures."""


class ContentFetchError(ContentServiceError):
    """The content service answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the content service.
        message: Error message extracted from the response body.
    """

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message or f"HTTP {status_code}"
        super().__init__(f"Content service error ({status_code}): {self.message}")


class ContentTimeoutError(ContentServiceError):
    """The request did not complete within the configured timeout."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Content service timeout after {timeout_seconds}s")


class ContentConnectionError(ContentServiceError):
    """The content service could not be reached."""
