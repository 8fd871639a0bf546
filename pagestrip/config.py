"""Centralised settings for pagestrip.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pagestrip import __version__
from pagestrip.errors import ConfigurationError

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _optional_float(name: str, value: str) -> Optional[float]:
    """Return *value* as a float, or ``None`` when blank.

    Raises:
        ConfigurationError: If *value* is not a number.
    """
    if not value.strip():
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}") from exc


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP fetch
    # ------------------------------------------------------------------
    # Kept as text so a bad value is reported when a fetch is attempted.
    request_timeout_raw: str = field(
        default_factory=lambda: os.environ.get("PAGESTRIP_REQUEST_TIMEOUT", "")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PAGESTRIP_USER_AGENT", f"pagestrip/{__version__}"
        )
    )
    follow_redirects: bool = field(
        default_factory=lambda: os.environ.get("PAGESTRIP_FOLLOW_REDIRECTS", "true").lower() in _TRUTHY
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    # Relative paths are resolved against the working directory at write time.
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("PAGESTRIP_OUTPUT_DIR", "."))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("PAGESTRIP_LOG_LEVEL", "WARNING").upper()
    )

    @property
    def request_timeout(self) -> Optional[float]:
        """Seconds before a fetch gives up; ``None`` leaves it unbounded."""
        return _optional_float("PAGESTRIP_REQUEST_TIMEOUT", self.request_timeout_raw)

    @property
    def request_headers(self) -> dict[str, str]:
        """Default headers sent with every fetch."""
        return {"User-Agent": self.user_agent}


# Module-level singleton, import this everywhere:
#   from pagestrip.config import settings
settings = Settings()
