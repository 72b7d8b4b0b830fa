"""
API routes for prodscrape.
"""
from typing import Any, Dict, Tuple

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from ..exceptions import FetchFailed, InvalidRequest
from ..extractors.fetcher import PageFetcher
from ..extractors.html_extractor import ProductPageExtractor
from ..logger import get_logger
from ..models import FetchConfig
from ..schemas import ErrorResponse, ScrapeRequest, ScrapeResponse, ScrapedProductSchema

logger = get_logger(__name__)

# Create blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api')


def get_extractor() -> ProductPageExtractor:
    """Build a fresh extractor for one request."""
    return ProductPageExtractor(fetcher=PageFetcher(FetchConfig.from_config()))


def error_response(message: str, status: int) -> Tuple[Response, int]:
    return jsonify(ErrorResponse(error=message).model_dump()), status


@api_bp.route('/scrape-product', methods=['POST'])
def scrape_product() -> Tuple[Response, int]:
    """
    Scrape a product page into a product record.

    Expected JSON:
    {
        "url": "https://shop.example.com/p/123"
    }

    Returns:
    {
        "product": {
            "title": "...",
            "description": "...",
            "price": 49.99,
            "images": ["https://..."]
        }
    }

    Errors:
        400 {"error": "URL is required"}      url missing or blank
        400 {"error": "Invalid URL"}          url is not absolute http(s)
        400 {"error": "Failed to fetch URL"}  target unreachable or non-2xx
        500 {"error": "<message>"}            anything else
    """
    try:
        data: Dict[str, Any] = request.get_json(force=True, silent=True) or {}
        if not isinstance(data, dict):
            data = {}

        url = data.get('url')
        if not url or (isinstance(url, str) and not url.strip()):
            return error_response('URL is required', 400)

        try:
            scrape_request = ScrapeRequest.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Rejected scrape request for {url!r}: {e.errors()[0]['msg']}")
            return error_response('Invalid URL', 400)

        logger.info(f"Scraping URL: {scrape_request.url}")

        extractor = get_extractor()
        try:
            product = extractor.extract(scrape_request.url)
        finally:
            extractor.close()

        missing = product.missing_fields()
        if missing:
            logger.info(f"Partial extraction for {scrape_request.url}: missing {', '.join(missing)}")

        body = ScrapeResponse(product=ScrapedProductSchema.from_product(product))
        return jsonify(body.to_json_dict()), 200

    except InvalidRequest:
        return error_response('Invalid URL', 400)

    except FetchFailed as e:
        logger.warning(f"Fetch failed: {e}")
        return error_response('Failed to fetch URL', 400)

    except Exception as e:
        logger.error(f"Error in scrape-product endpoint: {e}", exc_info=True)
        return error_response(str(e), 500)
