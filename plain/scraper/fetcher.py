"""HTTP fetcher: one GET, a status check, and the response handed downstream."""

from __future__ import annotations

import logging

import httpx

from plain.config import settings
from plain.errors import InvalidURLError, PageStatusError

_logger = logging.getLogger(__name__)


def build_client() -> httpx.Client:
    """Return an ``httpx.Client`` with the default headers.

    Redirects are followed; the timeout is left at the httpx default.
    """
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )


def fetch_page(
    url: str,
    client: httpx.Client | None = None,
    logger: logging.Logger | None = None,
) -> httpx.Response:
    """GET *url* and return the response.

    The caller owns the response and must close it once the body has been
    consumed; :func:`~plain.scraper.extractor.extract_text` does so.  When
    *client* is omitted a temporary one is used for this single request.

    Raises:
        InvalidURLError: If *url* cannot be parsed into a request.
        PageStatusError: If the final status is anything but 200.
        httpx.TransportError: On DNS, connection or timeout failures.
    """
    log = logger or _logger

    if client is None:
        with build_client() as owned:
            return fetch_page(url, owned, log)

    log.debug("GET %s", url)
    try:
        response = client.get(url)
    except (httpx.InvalidURL, httpx.UnsupportedProtocol, UnicodeError) as exc:
        raise InvalidURLError(url, str(exc)) from exc

    log.debug("HTTP %d %s from %s", response.status_code, response.reason_phrase, url)

    if response.status_code != 200:
        response.close()
        raise PageStatusError(url, response.status_code, response.reason_phrase)

    return response
