"""Exceptions raised by the fetch and extraction stages."""

from __future__ import annotations


class PlainError(Exception):
    """Base class for every error raised by plain itself."""


class PageStatusError(PlainError):
    """The server answered with something other than ``200 OK``."""

    def __init__(self, url: str, status_code: int, reason: str) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Unexpected status code: {status_code} {reason}".rstrip())


class NothingToProcessError(PlainError):
    """Extraction was handed no response at all."""

    def __init__(self, message: str = "nothing to process") -> None:
        super().__init__(message)


class ParseError(PlainError):
    """The HTML parser rejected the response body."""


class InvalidURLError(PlainError):
    """The URL could not be turned into a request (bad host, port or characters)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Invalid URL {url!r}: {reason}")
