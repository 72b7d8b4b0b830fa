"""
Unit tests for the page fetcher.

The requests session is replaced with a Mock so no network is used.
"""
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

from prodscrape.exceptions import FetchFailed
from prodscrape.extractors.fetcher import BROWSER_HEADERS, PageFetcher
from prodscrape.extractors.html_extractor import ProductPageExtractor
from prodscrape.models import FetchConfig

URL = "https://shop.example.com/p/123"


def make_response(status_code: int, text: str = "") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.content = text.encode("utf-8")
    response.headers = {"Content-Type": "text/html"}
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


class TestFetch:

    def test_returns_body_on_success(self, session, fetch_config):
        session.get.return_value = make_response(200, "<html>ok</html>")

        fetcher = PageFetcher(fetch_config, session=session)

        assert fetcher.fetch(URL) == "<html>ok</html>"
        session.get.assert_called_once_with(URL, timeout=fetch_config.timeout_s, allow_redirects=True)

    @pytest.mark.parametrize("status", [301, 404, 500, 503])
    def test_non_success_status_raises(self, session, fetch_config, status):
        session.get.return_value = make_response(status, "nope")

        with pytest.raises(FetchFailed) as excinfo:
            PageFetcher(fetch_config, session=session).fetch(URL)

        assert excinfo.value.status_code == status
        assert excinfo.value.url == URL

    def test_connection_error_raises(self, session, fetch_config):
        session.get.side_effect = requests.ConnectionError("dns failure")

        with pytest.raises(FetchFailed) as excinfo:
            PageFetcher(fetch_config, session=session).fetch(URL)

        assert excinfo.value.status_code is None
        assert excinfo.value.reason == "ConnectionError"

    def test_timeout_raises(self, session, fetch_config):
        session.get.side_effect = requests.Timeout("too slow")

        with pytest.raises(FetchFailed) as excinfo:
            PageFetcher(fetch_config, session=session).fetch(URL)

        assert excinfo.value.reason == "timeout"

    def test_is_not_retried_by_default(self, session, fetch_config):
        session.get.return_value = make_response(503)

        with pytest.raises(FetchFailed):
            PageFetcher(fetch_config, session=session).fetch(URL)

        assert session.get.call_count == 1


class TestSession:

    def test_sends_browser_headers(self, fetch_config):
        fetcher = PageFetcher(fetch_config)
        for name, value in BROWSER_HEADERS.items():
            assert fetcher.session.headers[name] == value
        assert "Mozilla/5.0" in fetcher.session.headers["User-Agent"]
        fetcher.close()

    def test_no_retry_policy_by_default(self, fetch_config):
        fetcher = PageFetcher(fetch_config)
        assert fetcher.session.get_adapter(URL).max_retries.total == 0
        fetcher.close()

    def test_opt_in_retry_policy(self):
        with PageFetcher(FetchConfig(retries=3, backoff_s=0.1)) as fetcher:
            retry = fetcher.session.get_adapter(URL).max_retries
            assert retry.total == 3
            assert 503 in retry.status_forcelist

    def test_explicit_timeout_default(self):
        assert FetchConfig.default().timeout_s == 15.0


def make_real_response(body: bytes, content_type: str) -> requests.Response:
    """Build a Response the way requests' adapter does, encoding from headers."""
    response = requests.Response()
    response.status_code = 200
    response._content = body
    response.headers = CaseInsensitiveDict({"Content-Type": content_type})
    response.encoding = get_encoding_from_headers(response.headers)
    return response


class TestDecoding:

    KURTA_PAGE = (
        "<html><head><title>Kurta – Buy Online | X</title></head>"
        "<body><span class=\"amount\">₹1,499</span></body></html>"
    )

    def test_undeclared_charset_is_read_as_utf8(self, session, fetch_config):
        session.get.return_value = make_real_response(self.KURTA_PAGE.encode("utf-8"), "text/html")

        assert PageFetcher(fetch_config, session=session).fetch(URL) == self.KURTA_PAGE

    def test_undeclared_charset_page_extracts_cleanly(self, session, fetch_config):
        session.get.return_value = make_real_response(self.KURTA_PAGE.encode("utf-8"), "text/html")
        fetcher = PageFetcher(fetch_config, session=session)

        product = ProductPageExtractor(fetcher=fetcher).extract(URL)

        assert product.title == "Kurta"
        assert product.price == 1499.0

    def test_declared_charset_is_respected(self, session, fetch_config):
        body = "<p>Café crème</p>"
        session.get.return_value = make_real_response(
            body.encode("windows-1252"), "text/html; charset=windows-1252"
        )

        assert PageFetcher(fetch_config, session=session).fetch(URL) == body
