"""End-to-end pipeline: fetch → extract, collecting every error on the way.

Each stage logs its own failure and the pipeline keeps going, so a failed
fetch still reaches extraction (which then reports it has nothing to
process).  The returned :class:`~plain.scraper.models.PlainDocument` carries
all of those errors, so callers can tell "the page had no text" apart from
"the page never loaded".
"""

from __future__ import annotations

import logging

import httpx

from plain.errors import PlainError
from plain.scraper.extractor import assemble, extract_segments
from plain.scraper.fetcher import fetch_page
from plain.scraper.models import PlainDocument

_logger = logging.getLogger(__name__)


def make_plain(
    url: str,
    client: httpx.Client | None = None,
    logger: logging.Logger | None = None,
) -> PlainDocument:
    """Fetch *url* and extract its paragraphs and headers as plaintext."""
    log = logger or _logger
    document = PlainDocument(url=url)

    response = None
    try:
        response = fetch_page(url, client=client, logger=log)
    except (PlainError, httpx.HTTPError) as exc:
        log.error("Fetching %s failed: %s", url, exc)
        document.errors.append(exc)

    try:
        document.segments = extract_segments(response, logger=log)
    except (PlainError, httpx.HTTPError) as exc:
        log.error("Extracting text from %s failed: %s", url, exc)
        document.errors.append(exc)

    document.text = assemble(document.segments)
    return document
