"""
Pytest configuration and fixtures for prodscrape tests.
"""
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

import pytest
from prodscrape.api import create_app
from prodscrape.extractors.html_extractor import ProductPageExtractor
from prodscrape.models import FetchConfig


@pytest.fixture
def extractor():
    """Create an extractor for HTML-mode tests."""
    return ProductPageExtractor()


@pytest.fixture
def fetch_config():
    """Create a default fetch configuration."""
    return FetchConfig.default()


@pytest.fixture
def sample_url():
    """Sample product URL for testing."""
    return "https://shop.example.com/p/123"


@pytest.fixture
def sample_html():
    """Sample product page for testing."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Classic Bomber Jacket &#8211; Buy Online | ShopX</title>
        <meta name="description" content="Bomber jacket.">
        <meta property="og:description" content="Premium leather bomber jacket, handcrafted in small batches with a quilted lining and ribbed cuffs.">
        <meta property="og:image" content="https://cdn.shopx.example/images/bomber-front.jpg">
    </head>
    <body>
        <img src="/static/logo.png">
        <h1>Classic Bomber Jacket</h1>
        <div class="product-price">Now only $149.00 (was $199.00)</div>
        <img src="/images/bomber-back.jpg">
        <img src="//cdn.shopx.example/images/bomber-detail.jpg">
        <img src="https://cdn.shopx.example/images/bomber-front.jpg">
    </body>
    </html>
    """


@pytest.fixture
def app():
    """Create the Flask app in testing mode."""
    app = create_app()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
