"""Errors raised by the release client."""

from pathlib import Path
from typing import Optional


class GoReleaseError(Exception):
    """Base class for release listing and download failures."""


class RequestFailed(GoReleaseError):
    """The HTTP request could not be completed."""

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"request failed: GET {url}: {str(cause) or type(cause).__name__}")


class UnexpectedStatus(GoReleaseError):
    """The server answered with a status other than 200."""

    def __init__(self, url: str, status: int, reason: Optional[str] = None):
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(f"unexpected status: GET {url}: {status} {reason or ''}".rstrip())


class ParseFailure(GoReleaseError):
    """The distribution index page could not be parsed."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        if url:
            message = f"{message} ({url})"
        super().__init__(f"parse failure: {message}")


class ChecksumMismatch(GoReleaseError):
    """A downloaded archive does not match its expected SHA-256 digest."""

    def __init__(self, path: Path, expected: str, actual: str):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"checksum mismatch for {path}: expected {expected}, got {actual}")
