"""
Product page fetching and extraction.
"""
from .fetcher import PageFetcher, BROWSER_HEADERS
from .html_extractor import ProductPageExtractor

__all__ = [
    "PageFetcher",
    "BROWSER_HEADERS",
    "ProductPageExtractor",
]
