"""
Error taxonomy for prodscrape.

A field that an extraction pass cannot find is not an error: it is simply
left unset on the ScrapedProduct.
"""
from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for errors raised by the scraper."""


class InvalidRequest(ScraperError):
    """The scrape request is missing its URL or the URL is not absolute."""


class FetchFailed(ScraperError):
    """
    The scrape target could not be retrieved.

    DNS errors, timeouts and non-success statuses all collapse into this
    error. ``status_code`` and ``reason`` are kept for logging only.
    """

    def __init__(
        self,
        url: str,
        *,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"status {status_code}" if status_code is not None else (reason or "unknown error")
        super().__init__(f"Failed to fetch {url}: {detail}")
