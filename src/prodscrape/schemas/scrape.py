"""
Pydantic schemas for scrape API validation.

Provides input validation at the API boundary while the extractor keeps
working with the dataclass-based ScrapedProduct.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import ScrapedProduct
from ..utils.validators import is_valid_url


class ScrapeRequest(BaseModel):
    """Request schema for the scrape endpoint."""

    model_config = ConfigDict(extra="ignore")

    url: str = Field(..., min_length=1, description="Absolute URL of the product page")

    @field_validator('url', mode='before')
    @classmethod
    def validate_url(cls, v):
        if not isinstance(v, str):
            raise ValueError("url must be a string")
        v = v.strip()
        if not is_valid_url(v):
            raise ValueError("url must be an absolute http(s) URL")
        return v


class ScrapedProductSchema(BaseModel):
    """Product record returned to callers."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    original_price: Optional[float] = Field(default=None, alias="originalPrice")
    images: List[str] = Field(default_factory=list, max_length=10)
    currency: Optional[str] = None

    @classmethod
    def from_product(cls, product: ScrapedProduct) -> ScrapedProductSchema:
        return cls(
            title=product.title,
            description=product.description,
            price=product.price,
            original_price=product.original_price,
            images=list(product.images),
            currency=product.currency,
        )


class ScrapeResponse(BaseModel):
    """Successful response from the scrape endpoint."""

    product: ScrapedProductSchema

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys and unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Error body shared by every failure response."""

    error: str
