"""plain CLI — print the readable text of a web page.

Usage:
    python cli/main.py --url http://example.com
    python cli/main.py --url http://example.com --file example-output.txt
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from plain.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.output import route_output
from plain.config import settings
from plain.log import get_logger
from plain.scraper import make_plain

app = typer.Typer(
    name="plain",
    help="Fetch a web page and print its paragraphs and headers as plaintext.",
    add_completion=False,
)


@app.command()
def main(
    url: str = typer.Option(
        settings.default_url, "--url", help="URL of the page you'd like to read."
    ),
    file: str = typer.Option(
        "", "--file", help="Optional filepath to output the page text."
    ),
) -> None:
    """Retrieve URL and print a plaintext rendering of its content."""
    logger = get_logger()

    document = make_plain(url, logger=logger)
    if not document.ok:
        typer.echo(f"Could not read {url!r}; see the log above for details.", err=True)
        raise typer.Exit(code=1)

    if not route_output(document.text, file or None, logger=logger):
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
