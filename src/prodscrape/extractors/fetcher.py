"""
Page fetcher for scrape targets.

Retrieves raw HTML with a desktop-browser header set. Any failure (transport
error or non-success status) is raised as FetchFailed; nothing partial is
returned.
"""
from __future__ import annotations

from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions import FetchFailed
from ..logger import get_logger
from ..models import FetchConfig

logger = get_logger(__name__)


BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
}

RETRY_STATUS_CODES = [429, 500, 502, 503, 504]


class PageFetcher:
    """
    Fetch product pages over HTTP.

    Retrying is off unless ``config.retries`` is greater than zero, in which
    case a urllib3 Retry policy is mounted on the session.
    """

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or FetchConfig.from_config()
        self.session = session or self._build_session()

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(BROWSER_HEADERS)

        if self.config.retries > 0:
            retry_strategy = Retry(
                total=self.config.retries,
                backoff_factor=self.config.backoff_s,
                status_forcelist=RETRY_STATUS_CODES,
                allowed_methods=["GET"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)

        return session

    def fetch(self, url: str) -> str:
        """
        Fetch the HTML of a page.

        Args:
            url: Absolute URL of the scrape target

        Returns:
            Response body as text

        Raises:
            FetchFailed: The page could not be retrieved or the final
                response was not a 2xx
        """
        logger.debug("FETCH GET %s (timeout=%ss, retries=%d)",
                     url, self.config.timeout_s, self.config.retries)

        try:
            r = self.session.get(url, timeout=self.config.timeout_s, allow_redirects=True)
        except requests.Timeout as e:
            logger.error("FETCH Timeout after %ss for URL: %s", self.config.timeout_s, url)
            raise FetchFailed(url, reason="timeout") from e
        except requests.RequestException as e:
            logger.error("FETCH Request error for URL %s: %s: %s", url, type(e).__name__, e)
            raise FetchFailed(url, reason=type(e).__name__) from e

        logger.debug("FETCH Response: status=%d, content-type=%s, length=%d",
                     r.status_code, r.headers.get("Content-Type", "unknown"), len(r.content))

        if not 200 <= r.status_code < 300:
            logger.warning("FETCH Failed with status %d for URL: %s", r.status_code, url)
            raise FetchFailed(url, status_code=r.status_code)

        # Pages without a declared charset are decoded as UTF-8
        if "charset" not in r.headers.get("Content-Type", "").lower():
            r.encoding = "utf-8"

        return r.text

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def __enter__(self) -> PageFetcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
