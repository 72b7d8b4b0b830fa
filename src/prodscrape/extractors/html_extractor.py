from __future__ import annotations

import re
from typing import Optional, List, Tuple, Pattern

from bs4 import BeautifulSoup, Tag

from ..exceptions import InvalidRequest
from ..logger import get_logger
from ..models import ScrapedProduct, FetchConfig
from ..utils.text_cleaning import clean_text, decode_entities
from ..utils.urls import resolve_url
from ..utils.validators import is_valid_url, parse_price
from .fetcher import PageFetcher

logger = get_logger(__name__)


class ProductPageExtractor:
    """
    Extract a product record from an arbitrary product page.

    This extractor can work in two modes:
    1. URL mode: Fetches the page and extracts product data
    2. HTML mode: Extracts from pre-fetched HTML text

    Each field (title, description, price, images) is filled by its own
    pass. A pass that finds nothing leaves its field unset and never stops
    the other passes.
    """

    # Title sources are tried in order: <title>, these meta properties, <h1>
    TITLE_META_PROPERTIES = re.compile(r'^(og:title|twitter:title)$', re.I)

    # Generic storefront taglines stripped from the end of titles
    TITLE_SUFFIX_PHRASES = ['Buy Online', 'Shop Now', 'Online Store']

    DESCRIPTION_META_NAMES = re.compile(r'^(description|og:description|twitter:description)$', re.I)
    DESCRIPTION_META_PROPERTIES = re.compile(r'^(og:description|twitter:description)$', re.I)

    # Content containers scanned when meta descriptions are missing or terse
    DESCRIPTION_CONTAINERS: List[Tuple[str, Pattern[str]]] = [
        ('div', re.compile(r'product.*description', re.I)),
        ('div', re.compile(r'description', re.I)),
        ('section', re.compile(r'description', re.I)),
        ('p', re.compile(r'description', re.I)),
    ]
    MIN_META_DESCRIPTION_CHARS = 50

    # First pattern yielding a positive number wins; group 1 is the amount
    PRICE_PATTERNS: List[Tuple[str, Pattern[str]]] = [
        ('dollar', re.compile(r'\$([\d,]+\.?\d*)')),
        ('rupee', re.compile(r'₹([\d,]+\.?\d*)')),
        ('euro', re.compile(r'€([\d,]+\.?\d*)')),
        ('pound', re.compile(r'£([\d,]+\.?\d*)')),
        ('json_price', re.compile(r'"price[^"]*":\s*"?([0-9,]+\.?[0-9]*)"?', re.I)),
        ('json_amount', re.compile(r'"amount[^"]*":\s*"?([0-9,]+\.?[0-9]*)"?', re.I)),
        ('price_label', re.compile(r'price[^>]*>\s*([₹$€£]?[\d,]+\.?\d*)', re.I)),
    ]

    IMAGE_META_PROPERTIES = re.compile(r'^(og:image|twitter:image)$', re.I)
    IMAGE_NOISE_MARKERS = ['logo', 'icon', 'sprite', 'placeholder']
    MIN_IMAGE_URL_CHARS = 21
    MAX_IMAGES = 10

    def __init__(
        self,
        *,
        fetcher: Optional[PageFetcher] = None,
        fetch_config: Optional[FetchConfig] = None,
    ) -> None:
        """
        Initialize the product page extractor.

        Args:
            fetcher: Fetcher used in URL mode (created on first use if omitted)
            fetch_config: Settings for the fetcher created on first use
        """
        self._fetcher = fetcher
        self.fetch_config = fetch_config

    @property
    def fetcher(self) -> PageFetcher:
        if self._fetcher is None:
            self._fetcher = PageFetcher(self.fetch_config)
        return self._fetcher

    def close(self) -> None:
        """Release the fetcher's connections."""
        if self._fetcher is not None:
            self._fetcher.close()

    def extract(self, url: str) -> ScrapedProduct:
        """
        Fetch a product page and extract its product record.

        Args:
            url: Absolute http(s) URL of the product page

        Returns:
            ScrapedProduct with whatever fields could be found

        Raises:
            InvalidRequest: The URL is not an absolute http(s) URL
            FetchFailed: The page could not be retrieved
        """
        url = (url or "").strip()
        if not is_valid_url(url):
            raise InvalidRequest("Invalid URL")

        html = self.fetcher.fetch(url)
        return self._extract_from_html(html, url)

    def extract_from_html(self, html: str, url: str) -> ScrapedProduct:
        """
        Extract product data from HTML text (no fetching).

        Args:
            html: Raw HTML content as string
            url: URL the HTML was served from, used to resolve image links

        Returns:
            ScrapedProduct with whatever fields could be found
        """
        if not html or not html.strip():
            return ScrapedProduct()

        return self._extract_from_html(html, url)

    def _extract_from_html(self, html: str, url: str) -> ScrapedProduct:
        """Run every extraction pass over one page."""
        soup = BeautifulSoup(html, "html.parser")

        product = ScrapedProduct(
            title=self._extract_title(soup),
            description=self._extract_description(soup),
            price=self._extract_price(html),
            images=self._extract_images(soup, url),
        )

        logger.info(
            "EXTRACT %s: title=%s, description=%s chars, price=%s, images=%d",
            url,
            bool(product.title),
            len(product.description) if product.description else 0,
            product.price,
            len(product.images),
        )

        return product

    # ------------------------------------------------------------------
    # Title
    # ------------------------------------------------------------------

    def _extract_title(self, soup: BeautifulSoup) -> Optional[str]:
        """First non-empty of <title>, og/twitter title meta, <h1>."""
        for source, raw in self._title_candidates(soup):
            text = clean_text(raw, tag_replacement="")
            if not text:
                continue

            title = self._strip_site_suffix(text)
            logger.debug("TITLE Found via %s: %s", source, title[:80])
            return title or None

        logger.debug("TITLE Not found")
        return None

    def _title_candidates(self, soup: BeautifulSoup):
        tag = soup.find('title')
        if tag:
            yield 'title', tag.get_text()

        for meta in soup.find_all('meta', attrs={'property': self.TITLE_META_PROPERTIES}):
            content = meta.get('content')
            if content:
                yield 'meta', content
                break

        h1 = soup.find('h1')
        if h1:
            yield 'h1', h1.get_text()

    def _strip_site_suffix(self, title: str) -> str:
        """Remove trailing "- Buy Online | Brand" style suffixes."""
        phrases = '|'.join(re.escape(p) for p in self.TITLE_SUFFIX_PHRASES)
        title = re.sub(rf'\s*[-–—|]\s*(?:{phrases}).*$', '', title, flags=re.I)
        title = re.sub(r'\s*[-–—|]\s*$', '', title)
        return title.strip()

    # ------------------------------------------------------------------
    # Description
    # ------------------------------------------------------------------

    def _extract_description(self, soup: BeautifulSoup) -> Optional[str]:
        """Longest candidate wins; containers only when meta tags fall short."""
        best = ""

        for attr_name, pattern in (
            ('name', self.DESCRIPTION_META_NAMES),
            ('property', self.DESCRIPTION_META_PROPERTIES),
        ):
            for meta in soup.find_all('meta', attrs={attr_name: pattern}):
                content = meta.get('content') or ""
                if len(content) > len(best):
                    best = content

        if len(best) < self.MIN_META_DESCRIPTION_CHARS:
            logger.debug("DESC Meta description too short (%d chars), scanning containers", len(best))
            for tag_name, class_pattern in self.DESCRIPTION_CONTAINERS:
                element = soup.find(self._class_matcher(tag_name, class_pattern))
                if element is None:
                    continue

                text = clean_text(element.get_text(' '))
                if len(text) > len(best):
                    logger.debug("DESC Container <%s class~%s> gave %d chars",
                                 tag_name, class_pattern.pattern, len(text))
                    best = text

        description = clean_text(best)
        return description or None

    @staticmethod
    def _class_matcher(tag_name: str, class_pattern: Pattern[str]):
        def matches(tag: Tag) -> bool:
            if tag.name != tag_name:
                return False
            classes = ' '.join(tag.get('class', []) or [])
            return bool(class_pattern.search(classes))
        return matches

    # ------------------------------------------------------------------
    # Price
    # ------------------------------------------------------------------

    def _extract_price(self, html: str) -> Optional[float]:
        """Only the first match of each pattern is considered."""
        for name, pattern in self.PRICE_PATTERNS:
            match = pattern.search(html)
            if not match:
                continue

            price = parse_price(match.group(1))
            if price is not None:
                logger.debug("PRICE Found via %s: %s", name, price)
                return price

            logger.debug("PRICE %s matched unusable token %r", name, match.group(0)[:40])

        logger.debug("PRICE Not found")
        return None

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def _extract_images(self, soup: BeautifulSoup, base_url: str) -> List[str]:
        """Meta images first, then <img> tags; unique and capped."""
        candidates: List[str] = []

        for meta in soup.find_all('meta', attrs={'property': self.IMAGE_META_PROPERTIES}):
            content = (meta.get('content') or '').strip()
            if content:
                candidates.append(resolve_url(decode_entities(content), base_url))

        for img in soup.find_all('img'):
            src = (img.get('src') or img.get('data-src') or '').strip()
            if not src:
                continue

            image_url = resolve_url(decode_entities(src), base_url)
            if len(image_url) < self.MIN_IMAGE_URL_CHARS:
                continue
            candidates.append(image_url)

        images = [u for u in candidates if not self._is_noise_image(u)]
        images = list(dict.fromkeys(images))[:self.MAX_IMAGES]

        logger.debug("IMAGES Kept %d of %d candidates", len(images), len(candidates))
        return images

    def _is_noise_image(self, image_url: str) -> bool:
        lowered = image_url.lower()
        return any(marker in lowered for marker in self.IMAGE_NOISE_MARKERS)


__all__ = ['ProductPageExtractor']
