"""Save pipeline for a single page.

``save_page`` runs the whole job for one URL:

    validate → fetch → clean → write ``<output_dir>/<sanitized url>``

Nothing touches the filesystem until the page has been fetched and cleaned,
so a failed run never leaves a partial file behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from pagestrip.config import settings
from pagestrip.errors import FileSystemError
from pagestrip.scraper.cleaner import clean
from pagestrip.scraper.fetcher import fetch_url
from pagestrip.scraper.filenames import sanitize_filename
from pagestrip.scraper.models import SavedPage

logger = logging.getLogger(__name__)


def write_page(path: Path, html: str) -> int:
    """Write *html* to *path* as UTF-8, replacing any existing file.

    Returns the number of bytes written.

    Raises:
        FileSystemError: If the directory or file cannot be created.
    """
    data = html.encode("utf-8")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise FileSystemError(f"could not write {path}: {exc}") from exc
    return len(data)


def save_page(
    url: str,
    output_dir: Optional[Path] = None,
    client: Optional[httpx.Client] = None,
    filename: Optional[str] = None,
) -> SavedPage:
    """Fetch *url*, strip it, and write the result to disk.

    Args:
        url: Absolute http(s) URL of the page.
        output_dir: Target directory; defaults to ``settings.output_dir``.
        client: Optional ``httpx.Client`` to issue the request with.
        filename: Overrides the name derived from *url*.

    Returns:
        A :class:`SavedPage` describing the written file.
    """
    raw = fetch_url(url, client=client)
    if raw.content_type and "html" not in raw.content_type.lower():
        logger.warning("%s is served as %s, not HTML; cleaning it anyway", raw.url, raw.content_type)
    html = clean(raw.content)

    directory = Path(output_dir) if output_dir is not None else settings.output_dir
    path = directory / (filename or sanitize_filename(raw.url))
    written = write_page(path, html)
    logger.info("Saved %s to %s (%d bytes)", raw.url, path, written)

    return SavedPage(url=raw.url, path=path, bytes_written=written)
