"""
Utility modules for prodscrape.
"""
from .validators import is_valid_url, parse_price
from .text_cleaning import clean_text, decode_entities, normalize_whitespace, strip_html_tags
from .urls import get_origin, resolve_url

__all__ = [
    "is_valid_url",
    "parse_price",
    "clean_text",
    "decode_entities",
    "normalize_whitespace",
    "strip_html_tags",
    "get_origin",
    "resolve_url",
]
