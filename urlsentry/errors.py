from typing import Optional


class UrlSentryError(Exception):
    """Base class for every error raised by urlsentry."""


class MalformedURLError(UrlSentryError, ValueError):
    """The URL cannot be parsed; the request must be rejected."""

    def __init__(self, url: str, reason: str = "Invalid URL"):
        super().__init__(f"{reason}: {url!r}")
        self.url = url
        self.reason = reason


class FetchError(UrlSentryError):
    """Raised by the content fetcher. `status` mirrors an HTTP status code."""

    def __init__(self, message: str, status: Optional[int] = 500):
        super().__init__(message)
        self.message = message
        self.status = status


class AnalysisError(UrlSentryError):
    """The content-analysis collaborator failed."""
