"""
Text cleaning and normalization utilities.
"""
import re

# Deliberately bounded: only the entities product pages commonly leak
# into titles and descriptions.
HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&apos;": "'",
    "&#8211;": "–",
    "&#8212;": "—",
    "&#8216;": "'",
    "&#8217;": "'",
    "&#8220;": '"',
    "&#8221;": '"',
    "&#8230;": "…",
    "&nbsp;": " ",
}

_ENTITY_RE = re.compile(r"&[#\w]+;")
_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")


def decode_entities(text: str) -> str:
    """
    Decode the HTML entities listed in HTML_ENTITIES.

    Unknown entities are left untouched.

    Examples:
        >>> decode_entities("Fish &amp; Chips &#8211; &copy;")
        'Fish & Chips – &copy;'
    """
    if not text:
        return ""

    return _ENTITY_RE.sub(lambda m: HTML_ENTITIES.get(m.group(0), m.group(0)), text)


def normalize_whitespace(text: str) -> str:
    """
    Normalize whitespace in text.

    Examples:
        >>> normalize_whitespace("hello    world\\n\\ntest")
        'hello world test'
    """
    if not text:
        return ""

    return _WS_RE.sub(" ", text).strip()


def strip_html_tags(text: str, replacement: str = "") -> str:
    """
    Remove HTML tags from text.

    Examples:
        >>> strip_html_tags("<p>Hello <strong>world</strong></p>")
        'Hello world'
    """
    if not text:
        return ""

    return _TAG_RE.sub(replacement, text)


def clean_text(
    text: str,
    strip_html: bool = True,
    normalize_ws: bool = True,
    tag_replacement: str = " ",
) -> str:
    """
    Strip tags, decode entities and normalize whitespace.

    Args:
        text: Text to clean
        strip_html: Remove HTML tags
        normalize_ws: Normalize whitespace
        tag_replacement: What each removed tag is replaced with

    Returns:
        Cleaned text

    Examples:
        >>> clean_text("<p>Tom &amp;  Jerry</p>")
        'Tom & Jerry'
    """
    if not text:
        return ""

    if strip_html:
        text = strip_html_tags(text, tag_replacement)

    text = decode_entities(text)

    if normalize_ws:
        text = normalize_whitespace(text)

    return text
