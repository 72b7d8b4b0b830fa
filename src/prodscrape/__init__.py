"""
prodscrape - Generic product page scraper.

Fetches an arbitrary e-commerce product page and heuristically extracts
title, description, price and images without site-specific configuration.
"""

__version__ = "1.0.0"

from .models import ScrapedProduct, FetchConfig
from .exceptions import ScraperError, InvalidRequest, FetchFailed
from .extractors.fetcher import PageFetcher
from .extractors.html_extractor import ProductPageExtractor

__all__ = [
    "ScrapedProduct",
    "FetchConfig",
    "ScraperError",
    "InvalidRequest",
    "FetchFailed",
    "PageFetcher",
    "ProductPageExtractor",
]
