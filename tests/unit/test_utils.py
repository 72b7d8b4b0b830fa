"""
Unit tests for text cleaning, URL resolution and validators.
"""
import pytest

from prodscrape.utils.text_cleaning import clean_text, decode_entities, strip_html_tags
from prodscrape.utils.urls import get_origin, resolve_url
from prodscrape.utils.validators import is_valid_url, parse_price


class TestDecodeEntities:

    @pytest.mark.parametrize("raw, expected", [
        ("Fish &amp; Chips", "Fish & Chips"),
        ("&lt;b&gt;", "<b>"),
        ("&quot;hi&quot; &apos;there&apos;", "\"hi\" 'there'"),
        ("a &#8211; b &#8212; c", "a – b — c"),
        ("&#8216;x&#8217; &#8220;y&#8221;", "'x' \"y\""),
        ("wait&#8230;", "wait…"),
        ("a&nbsp;b", "a b"),
    ])
    def test_table_entries(self, raw, expected):
        assert decode_entities(raw) == expected

    def test_unknown_entities_are_kept(self):
        assert decode_entities("&copy; 2024 &#169;") == "&copy; 2024 &#169;"

    def test_decodes_a_single_level(self):
        assert decode_entities("&amp;amp;") == "&amp;"


class TestCleanText:

    def test_strips_tags_and_collapses_whitespace(self):
        assert clean_text("<p>Tom &amp;\n  <b>Jerry</b></p>") == "Tom & Jerry"

    def test_tag_replacement(self):
        assert clean_text("Foo<b>Bar</b>", tag_replacement="") == "FooBar"

    def test_strip_html_tags(self):
        assert strip_html_tags("<p>Hello <strong>world</strong></p>") == "Hello world"

    def test_empty(self):
        assert clean_text("") == ""


class TestResolveUrl:

    def test_absolute_urls_unchanged(self):
        url = "http://other.example.org/a.jpg?v=2"
        assert resolve_url(url, "https://shop.example.com/p/1") == url

    def test_protocol_relative_gets_https(self):
        assert resolve_url("//cdn.example.com/a.jpg", "http://shop.example.com/p/1") == (
            "https://cdn.example.com/a.jpg"
        )

    def test_root_relative(self):
        assert resolve_url("/images/product1.jpg", "https://shop.example.com/p/123") == (
            "https://shop.example.com/images/product1.jpg"
        )

    def test_path_relative_uses_origin_not_path(self):
        assert resolve_url("images/a.jpg", "https://shop.example.com/p/123/detail") == (
            "https://shop.example.com/images/a.jpg"
        )

    def test_keeps_port(self):
        assert resolve_url("/img/a.png", "http://localhost:8080/x/y") == "http://localhost:8080/img/a.png"

    def test_unparseable_base_returns_candidate(self):
        assert resolve_url("/img/a.png", "not a url") == "/img/a.png"

    def test_never_raises_on_bad_base(self):
        assert resolve_url("a.png", "http://[::1") == "a.png"


class TestGetOrigin:

    def test_origin_drops_path_query_and_credentials(self):
        assert get_origin("https://user:pw@shop.example.com:8443/p/1?x=1") == "https://shop.example.com:8443"

    def test_none_without_host(self):
        assert get_origin("/relative/path") is None


class TestValidators:

    @pytest.mark.parametrize("url", [
        "https://shop.example.com/p/123",
        "http://localhost:5000",
    ])
    def test_valid_urls(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize("url", ["", "shop.example.com/p/1", "/p/1", "ftp://files.example.com/a", None, 42])
    def test_invalid_urls(self, url):
        assert not is_valid_url(url)

    @pytest.mark.parametrize("token, expected", [
        ("$49.99", 49.99),
        ("₹1,499", 1499.0),
        ("€1,234.5", 1234.5),
        ("£12.", 12.0),
        ("899", 899.0),
    ])
    def test_parse_price(self, token, expected):
        assert parse_price(token) == expected

    @pytest.mark.parametrize("token", ["$0.00", "$,", "", "abc"])
    def test_parse_price_rejects(self, token):
        assert parse_price(token) is None
