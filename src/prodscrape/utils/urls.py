"""
URL resolution for links found on a scraped page.
"""
from typing import Optional
from urllib.parse import urljoin, urlsplit

from ..logger import get_logger

logger = get_logger(__name__)


def get_origin(url: str) -> Optional[str]:
    """
    Return the origin (scheme, host and port) of an absolute URL.

    Returns None when the URL has no scheme or host.

    Examples:
        >>> get_origin("https://shop.example.com:8443/p/123?x=1")
        'https://shop.example.com:8443'
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        return None

    host = parts.netloc.rsplit("@", 1)[-1]
    return f"{parts.scheme}://{host}"


def resolve_url(candidate: str, base_url: str) -> str:
    """
    Turn a link found on a page into an absolute URL.

    Absolute http(s) links are returned unchanged, protocol-relative links
    get an ``https:`` scheme and anything else is resolved against the
    origin of ``base_url`` (not its path). If the base cannot be parsed the
    candidate is returned as-is.

    Args:
        candidate: Link as written in the page
        base_url: URL of the page the link was found on

    Returns:
        Absolute URL, or the candidate unchanged when it cannot be resolved

    Examples:
        >>> resolve_url("/images/a.jpg", "https://shop.example.com/p/123")
        'https://shop.example.com/images/a.jpg'
        >>> resolve_url("//cdn.example.com/a.jpg", "http://shop.example.com/")
        'https://cdn.example.com/a.jpg'
    """
    if candidate.startswith(("http://", "https://")):
        return candidate

    if candidate.startswith("//"):
        return "https:" + candidate

    try:
        origin = get_origin(base_url)
        if origin is None:
            logger.debug("RESOLVE Base URL has no origin: %s", base_url)
            return candidate
        return urljoin(origin + "/", candidate)
    except ValueError as e:
        logger.debug("RESOLVE Could not resolve %s against %s: %s", candidate, base_url, e)
        return candidate
