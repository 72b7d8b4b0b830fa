"""
Input validation utilities.
"""
import math
import re
from typing import Optional
from urllib.parse import urlparse

_PRICE_NOISE_RE = re.compile(r"[₹$€£,]")


def is_valid_url(url: str) -> bool:
    """
    Check if a string is an absolute HTTP/HTTPS URL with a host.

    Args:
        url: URL string to validate

    Returns:
        True if URL is valid, False otherwise
    """
    if not url or not isinstance(url, str):
        return False

    try:
        result = urlparse(url.strip())
        return all([
            result.scheme in ("http", "https"),
            result.netloc,
        ])
    except ValueError:
        return False


def parse_price(token: str) -> Optional[float]:
    """
    Parse a price token such as ``$1,299.00`` into a number.

    Currency symbols and thousands separators are stripped. Only finite,
    strictly positive values are accepted.

    Examples:
        >>> parse_price("₹1,499")
        1499.0
        >>> parse_price("$0.00") is None
        True
    """
    if not token:
        return None

    cleaned = _PRICE_NOISE_RE.sub("", token).strip()
    try:
        value = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(value) or value <= 0:
        return None

    return value
