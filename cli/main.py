"""pagestrip CLI: fetch one page and save a stripped copy of its HTML.

Usage:
    python cli/main.py https://example.com/
    python cli/main.py https://example.com/ --output-dir pages --verbose

The cleaned page is written to the output directory (default: the current
working directory) under a file name derived from the URL.  Any failure is
printed as ``error: <message>`` on stderr and exits with status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pagestrip.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import NoReturn, Optional

import typer

from pagestrip.config import settings
from pagestrip.errors import MissingInputError, PageStripError
from pagestrip.scraper.saver import save_page

app = typer.Typer(
    name="pagestrip",
    help="Fetch a web page and save a copy without scripts, styles, images or forms.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str) -> NoReturn:
    typer.echo(f"error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def strip(
    url: Optional[str] = typer.Argument(None, help="URL of the page to fetch."),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-d", help="Directory to write into (default: settings.output_dir)."
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="File name to use instead of the sanitized URL."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """Fetch URL, remove non-essential elements, and write the result to a file."""
    _configure_logging(verbose)

    try:
        if url is None:
            raise MissingInputError("missing URL argument (usage: pagestrip URL)")
        typer.echo(f"url: {url}")
        saved = save_page(url, output_dir=output_dir, filename=output)
    except PageStripError as exc:
        _fail(str(exc))
    except KeyboardInterrupt:
        _fail("interrupted")

    typer.echo(f"saved: {saved.path}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
