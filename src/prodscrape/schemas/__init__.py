"""
Pydantic schemas for API validation and data contracts.
"""

from .scrape import (
    ScrapeRequest,
    ScrapedProductSchema,
    ScrapeResponse,
    ErrorResponse,
)

__all__ = [
    'ScrapeRequest',
    'ScrapedProductSchema',
    'ScrapeResponse',
    'ErrorResponse',
]
