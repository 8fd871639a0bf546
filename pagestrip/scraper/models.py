"""Data models for the fetch → clean → save pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    content: bytes
    status_code: int
    content_type: str = ""


@dataclass
class SavedPage:
    """Where a cleaned page ended up on disk."""

    url: str
    path: Path
    bytes_written: int
