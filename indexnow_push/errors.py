# File: indexnow_push/errors.py
"""indexnow_push.errors: exceptions raised while preparing and pushing a URL list."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "IndexNowPushError",
    "ConfigError",
    "IntegrityError",
    "FetchError",
    "ParseError",
    "SubmissionTransportError",
]


class IndexNowPushError(Exception):
    """Base class for every fatal error of a push run."""


class ConfigError(IndexNowPushError):
    """Missing or invalid argument, config file or sitemap URL."""


class IntegrityError(IndexNowPushError):
    """The key file is unreachable, unreadable or does not hold the key."""


class FetchError(IndexNowPushError):
    """A sitemap document could not be retrieved."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"failed to fetch {url}: {reason}")


class ParseError(IndexNowPushError):
    """A sitemap document is neither a sitemap index nor a URL set."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to parse XML from {url}: {cause}")


class SubmissionTransportError(IndexNowPushError):
    """A provider endpoint could not be reached at all."""

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"unable to submit to {endpoint}: {reason}")
