"""Document cleaning: strip non-essential elements from an HTML page.

The page is parsed with BeautifulSoup's ``html5lib`` tree builder, which
follows the browser parsing algorithm: malformed markup is repaired rather
than rejected, and the ``<html>``/``<head>``/``<body>`` wrappers are always
synthesized.  Those wrappers survive into the output (minus ``<head>``,
which is itself denylisted).
"""

from __future__ import annotations

import logging
from typing import Union

from bs4 import BeautifulSoup

from pagestrip.errors import ParseError

logger = logging.getLogger(__name__)

DENYLIST: frozenset[str] = frozenset(
    {
        "script",
        "style",
        "head",
        "meta",
        "link",
        "img",
        "form",
        "input",
        "button",
    }
)

_PARSER = "html5lib"


def parse(raw: Union[bytes, str]) -> BeautifulSoup:
    """Parse *raw* into a document tree.

    Raises:
        ParseError: If the parser itself fails.
    """
    try:
        return BeautifulSoup(raw, _PARSER)
    except Exception as exc:  # noqa: BLE001
        raise ParseError(f"could not parse document: {exc}") from exc


def strip_denylisted(soup: BeautifulSoup) -> int:
    """Remove every denylisted element (with its subtree) from *soup*.

    Returns the number of subtrees removed.  Elements that were already
    destroyed along with an enclosing denylisted element are not counted.
    """
    removed = 0
    for name in sorted(DENYLIST):
        for tag in soup.find_all(name):
            if tag.decomposed:
                continue
            tag.decompose()
            removed += 1
    return removed


def clean(raw: Union[bytes, str]) -> str:
    """Return the serialized HTML of *raw* with all denylisted elements removed."""
    soup = parse(raw)
    removed = strip_denylisted(soup)
    logger.debug("Removed %d denylisted element(s)", removed)
    return str(soup)
