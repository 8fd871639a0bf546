"""Error hierarchy for pagestrip.

Every failure the program can report derives from :class:`PageStripError`,
so the CLI needs a single ``except`` clause to print it and exit.
"""

from __future__ import annotations


class PageStripError(Exception):
    """Base class for all errors raised by pagestrip."""


class MissingInputError(PageStripError):
    """No URL was supplied on the command line."""


class InvalidInputError(PageStripError):
    """The supplied URL is empty or not an absolute http(s) URL."""


class NetworkError(PageStripError):
    """The HTTP exchange failed at the transport level."""


class FetchTimeoutError(NetworkError):
    """The request did not complete within the configured timeout."""


class HTTPStatusError(PageStripError):
    """The server answered with a non-2xx status code."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"HTTP {status_code} for {url}")
        self.url = url
        self.status_code = status_code


class ParseError(PageStripError):
    """The HTML parser itself failed on the response body."""


class FileSystemError(PageStripError):
    """The cleaned page could not be written to disk."""


class ConfigurationError(PageStripError):
    """A setting read from the environment has an unusable value."""
