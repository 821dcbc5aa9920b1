"""Text extraction: turns an HTTP response into a plaintext document.

Only paragraphs and headers are kept.  Each matched element is classified
once into a :class:`~plain.scraper.models.TagKind`, formatted according to
that kind, and the results are joined with a blank line in document order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

import httpx
from bs4 import BeautifulSoup, ParserRejectedMarkup

from plain.errors import NothingToProcessError, ParseError
from plain.scraper.models import MatchedElement, TagKind

TEXT_SELECTOR = "p, h1, h2, h3, h4, h5, h6"
SEGMENT_SEPARATOR = "\n\n"

_HEADER_NAMES = frozenset(f"h{n}" for n in range(1, 7))

_logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def classify_tag(name: str) -> TagKind:
    """Map a tag name onto the kind of formatting it receives."""
    name = name.lower()
    if name == "p":
        return TagKind.PARAGRAPH
    if name in _HEADER_NAMES:
        return TagKind.HEADER
    return TagKind.OTHER


def select_elements(soup: BeautifulSoup) -> List[MatchedElement]:
    """Return every paragraph and header in *soup*, in document order."""
    matched: List[MatchedElement] = []
    for tag in soup.select(TEXT_SELECTOR):
        matched.append(
            MatchedElement(kind=classify_tag(tag.name), name=tag.name, text=tag.get_text())
        )
    return matched


# ---------------------------------------------------------------------------
# Formatting & assembly
# ---------------------------------------------------------------------------

def format_text(element: MatchedElement) -> str:
    """Format one element: paragraphs lose their line breaks, headers are uppercased."""
    if element.kind is TagKind.PARAGRAPH:
        return element.text.replace("\n", " ")
    if element.kind is TagKind.HEADER:
        return element.text.upper()
    return ""


def assemble(segments: Iterable[str]) -> str:
    """Join *segments* with a blank line between each one."""
    return SEGMENT_SEPARATOR.join(segments)


def format_elements(elements: Iterable[MatchedElement]) -> List[str]:
    return [format_text(element) for element in elements]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_html(
    markup: Union[str, bytes],
    encoding: Optional[str] = None,
) -> BeautifulSoup:
    """Parse *markup* with the stdlib-backed ``html.parser`` builder.

    *encoding* is the charset announced by the server, if any; without it
    BeautifulSoup sniffs the bytes (and any ``<meta charset>``) itself.

    Raises:
        ParseError: If the parser rejects the markup outright.
    """
    try:
        if encoding and isinstance(markup, bytes):
            return BeautifulSoup(markup, "html.parser", from_encoding=encoding)
        return BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Could not parse document: {exc}") from exc


def extract_from_html(markup: Union[str, bytes]) -> str:
    """Extract the plaintext rendering of an HTML document already in memory."""
    return assemble(format_elements(select_elements(parse_html(markup))))


def extract_segments(
    response: httpx.Response | None,
    logger: logging.Logger | None = None,
) -> List[str]:
    """Read, parse and format *response*, returning one string per element.

    The response is closed before returning, whatever happens while reading
    or parsing it.

    Raises:
        NothingToProcessError: If *response* is ``None``.
        ParseError: If the body cannot be parsed.
    """
    log = logger or _logger
    if response is None:
        raise NothingToProcessError()

    try:
        soup = parse_html(response.read(), response.charset_encoding)
    finally:
        response.close()

    elements = select_elements(soup)
    log.debug("Matched %d text elements", len(elements))
    return format_elements(elements)


def extract_text(
    response: httpx.Response | None,
    logger: logging.Logger | None = None,
) -> str:
    """Return the plaintext rendering of *response* (see :func:`extract_segments`)."""
    return assemble(extract_segments(response, logger))
