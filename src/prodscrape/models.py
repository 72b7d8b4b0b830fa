"""
Data models for prodscrape.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from .config import Config


@dataclass(slots=True)
class ScrapedProduct:
    """
    Product record extracted from a single product page.

    Every field is optional: a missing value means the matching extraction
    pass found nothing, not that the scrape failed.

    Attributes:
        title: Cleaned product name
        description: Longest plausible description text found
        price: First plausible positive price, currency symbol stripped
        original_price: Declared for callers, never populated
        images: Absolute, de-duplicated image URLs (at most 10)
        currency: Declared for callers, never populated
    """

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None
    images: List[str] = field(default_factory=list)
    currency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization, omitting unset fields."""
        data: Dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        if self.description is not None:
            data["description"] = self.description
        if self.price is not None:
            data["price"] = self.price
        if self.original_price is not None:
            data["originalPrice"] = self.original_price
        data["images"] = list(self.images)
        if self.currency is not None:
            data["currency"] = self.currency
        return data

    def missing_fields(self) -> List[str]:
        """Names of the fields no extraction pass could fill."""
        missing = [
            name for name in ("title", "description", "price")
            if getattr(self, name) is None
        ]
        if not self.images:
            missing.append("images")
        return missing


@dataclass
class FetchConfig:
    """
    Configuration for page fetching.

    Attributes:
        timeout_s: Request timeout in seconds
        retries: Retry attempts for failed GETs (0 disables retrying)
        backoff_s: Backoff factor between retries
    """

    timeout_s: float = 15.0
    retries: int = 0
    backoff_s: float = 0.5

    @classmethod
    def default(cls) -> FetchConfig:
        """Create default configuration."""
        return cls()

    @classmethod
    def from_config(cls) -> FetchConfig:
        """Create configuration from environment settings."""
        return cls(
            timeout_s=Config.FETCH_TIMEOUT_S,
            retries=Config.FETCH_RETRIES,
            backoff_s=Config.FETCH_BACKOFF_S,
        )
