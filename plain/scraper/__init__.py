"""Scraper package — web fetch & text extraction."""

from plain.scraper.extractor import extract_from_html, extract_text
from plain.scraper.fetcher import fetch_page
from plain.scraper.models import MatchedElement, PlainDocument, TagKind
from plain.scraper.pipeline import make_plain

__all__ = [
    "fetch_page",
    "extract_text",
    "extract_from_html",
    "make_plain",
    "MatchedElement",
    "PlainDocument",
    "TagKind",
]
