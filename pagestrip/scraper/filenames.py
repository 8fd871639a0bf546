"""Turn a URL into a file name that is safe to create in any directory."""

from __future__ import annotations

import re
import unicodedata

import pathvalidate

# Common filesystems (ext4, APFS, NTFS) cap a single path component at 255 bytes.
MAX_FILENAME_BYTES = 255

_SEPARATORS = re.compile(r"[ &_=+:]")
_ILLEGAL = re.compile(r"[^A-Za-z0-9.-]")

# Letters NFKD cannot decompose into an ASCII base.
_TRANSLITERATIONS = str.maketrans(
    {
        "ß": "ss",
        "Æ": "AE",
        "æ": "ae",
        "Ø": "O",
        "ø": "o",
        "Œ": "OE",
        "œ": "oe",
        "Ð": "D",
        "ð": "d",
        "Đ": "D",
        "đ": "d",
        "Þ": "TH",
        "þ": "th",
        "Ł": "L",
        "ł": "l",
    }
)


def _fold_accents(text: str) -> str:
    """Return *text* with accented letters reduced to their ASCII base."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_TRANSLITERATIONS))
    return decomposed.encode("ascii", "ignore").decode("ascii")


def _base_name(text: str) -> str:
    text = _fold_accents(text)
    text = _SEPARATORS.sub("-", text)
    text = _ILLEGAL.sub("", text)
    return text.replace("--", "-")


def _split_extension(name: str) -> tuple[str, str]:
    """Split *name* into ``(stem, ext)`` where *ext* keeps its leading dot.

    Only the last path component is searched for a dot, so the host part of
    a bare URL such as ``https://example.com`` yields ``.com``.
    """
    last = name.rsplit("/", 1)[-1]
    dot = last.rfind(".")
    if dot == -1:
        return name, ""
    ext = last[dot:]
    return name[: len(name) - len(ext)], ext


def _join_within_limit(stem: str, ext: str) -> str:
    """Join *stem* and *ext*, trimming the stem so the result fits on disk."""
    room = MAX_FILENAME_BYTES - len(ext) - 1
    if room < 1:
        return f"{stem}.{ext}"[:MAX_FILENAME_BYTES]
    return f"{stem[:room]}.{ext}"


def sanitize_filename(name: str) -> str:
    """Return *name* rewritten as a single, portable path component.

    Joining characters become ``_``, anything outside ``[A-Za-z0-9._]`` is
    dropped, and a missing extension becomes ``.unknown``::

        >>> sanitize_filename("https://example.com/a?b=c")
        'https_example.comab_c.unknown'

    Names longer than :data:`MAX_FILENAME_BYTES` lose the tail of their
    stem; the extension is kept.
    """
    stem, ext = _split_extension(name)
    clean_ext = _base_name(ext)
    if not clean_ext:
        clean_ext = ".unknown"
    joined = _join_within_limit(
        _base_name(stem).replace("-", "_"), clean_ext[1:].replace("-", "_")
    )
    return pathvalidate.sanitize_filename(joined, max_len=MAX_FILENAME_BYTES)
