"""Exceptions raised by a reads job."""
from typing import Optional


class BpReadsError(Exception):
    """Base class for every error a run can end with."""


class FetchError(BpReadsError):
    """A document could not be retrieved (transport error or non-2xx status)."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(FetchError):
    """A response body could not be turned into a navigable document."""


class NotFoundError(BpReadsError):
    """No reads post was found on the blog index."""


class DeliveryError(BpReadsError):
    """
    The notifier failed to deliver the payload.

    The computation itself succeeded; the finished run is attached as `result`
    by the job so callers can still inspect or re-send it.
    """

    def __init__(self, message: str, result: Optional[object] = None):
        super().__init__(message)
        self.result = result


class ConfigError(BpReadsError):
    """An environment setting has an unusable value."""
