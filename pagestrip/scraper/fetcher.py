"""HTTP fetcher: one GET per URL, body fully buffered."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from pagestrip.config import settings
from pagestrip.errors import (
    FetchTimeoutError,
    HTTPStatusError,
    InvalidInputError,
    NetworkError,
)
from pagestrip.scraper.models import RawPage

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")


def validate_url(url: str) -> str:
    """Return *url* stripped of surrounding whitespace if it is fetchable.

    Raises:
        InvalidInputError: If *url* is empty, relative, or not http(s).
    """
    url = (url or "").strip()
    if not url:
        raise InvalidInputError("URL must not be empty")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidInputError(f"malformed URL {url!r}: {exc}") from exc
    if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.host:
        raise InvalidInputError(f"not an absolute http(s) URL: {url!r}")
    return url


def build_client() -> httpx.Client:
    """Return an ``httpx.Client`` configured from :data:`settings`."""
    return httpx.Client(
        headers=settings.request_headers,
        timeout=settings.request_timeout,
        follow_redirects=settings.follow_redirects,
    )


def _get(client: httpx.Client, url: str) -> RawPage:
    logger.debug("GET %s", url)
    try:
        response = client.get(url)
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(f"timed out fetching {url}: {exc}") from exc
    except httpx.UnsupportedProtocol as exc:
        raise InvalidInputError(f"unsupported protocol in {url!r}: {exc}") from exc
    except httpx.InvalidURL as exc:
        raise InvalidInputError(f"malformed URL {url!r}: {exc}") from exc
    except httpx.RequestError as exc:
        raise NetworkError(f"could not fetch {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    logger.debug(
        "HTTP %s from %s (%d bytes, %s)",
        response.status_code,
        url,
        len(response.content),
        content_type or "no content-type",
    )
    if not response.is_success:
        raise HTTPStatusError(url, response.status_code)

    return RawPage(
        url=url,
        content=response.content,
        status_code=response.status_code,
        content_type=content_type,
    )


def fetch_url(url: str, client: Optional[httpx.Client] = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    When *client* is given it is used as-is and left open for the caller;
    otherwise a client is built from settings and closed afterwards.

    Raises:
        InvalidInputError: If *url* is not an absolute http(s) URL.
        NetworkError: On connection or transport failure.
        HTTPStatusError: If the server returns a non-2xx status code.
    """
    url = validate_url(url)
    if client is not None:
        return _get(client, url)
    with build_client() as owned:
        return _get(owned, url)
