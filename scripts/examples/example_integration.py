"""
Example: Using ProductPageExtractor outside the web service.

This demonstrates how to use ProductPageExtractor with:
1. A live product URL (fetch + extract)
2. Pre-fetched HTML saved from a previous scrape
3. A folder of saved HTML pages

Usage:
    python scripts/examples/example_integration.py https://shop.example.com/p/123
    python scripts/examples/example_integration.py --html-dir saved_pages/ --base-url https://shop.example.com
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, Any, List

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from prodscrape import FetchConfig, ProductPageExtractor, ScrapedProduct, ScraperError


def print_product(label: str, product: ScrapedProduct) -> None:
    print(f"\n{'='*70}")
    print(f"{label}")
    print(f"{'='*70}")
    print(f"  Title: {product.title or 'N/A'}")
    if product.description:
        print(f"  Description: {product.description[:120]}...")
    else:
        print("  Description: N/A")
    print(f"  Price: {product.price if product.price is not None else 'N/A'}")
    print(f"  Images: {len(product.images)}")
    for image in product.images:
        print(f"    - {image}")
    if product.missing_fields():
        print(f"  Missing: {', '.join(product.missing_fields())}")


def scrape_url(url: str, timeout_s: float) -> Dict[str, Any]:
    """Fetch one product page and extract it."""
    extractor = ProductPageExtractor(fetch_config=FetchConfig(timeout_s=timeout_s))
    try:
        product = extractor.extract(url)
    finally:
        extractor.close()

    print_product(f"Scraped: {url}", product)
    return product.to_dict()


def process_saved_html_files(html_dir: Path, base_url: str) -> List[Dict[str, Any]]:
    """
    Process pre-saved HTML files without any network access.

    Image links are resolved against ``base_url`` since saved pages no
    longer know where they came from.
    """
    extractor = ProductPageExtractor()
    results = []

    for path in sorted(html_dir.glob("*.html")):
        product = extractor.extract_from_html(path.read_text(encoding="utf-8", errors="replace"), base_url)
        print_product(f"File: {path.name}", product)
        results.append({"file": path.name, "product": product.to_dict()})

    return results


def main() -> int:
    parser = argparse.ArgumentParser(description="Scrape product pages with prodscrape")
    parser.add_argument("urls", nargs="*", help="Product page URLs to scrape")
    parser.add_argument("--html-dir", type=Path, help="Folder of saved .html pages")
    parser.add_argument("--base-url", default="https://example.com", help="Base URL for saved pages")
    parser.add_argument("--timeout", type=float, default=15.0, help="Fetch timeout in seconds")
    parser.add_argument("--json", action="store_true", help="Print JSON results at the end")
    args = parser.parse_args()

    if not args.urls and not args.html_dir:
        parser.error("give at least one URL or --html-dir")

    results: List[Dict[str, Any]] = []
    failed = 0

    for url in args.urls:
        try:
            results.append({"url": url, "product": scrape_url(url, args.timeout)})
        except ScraperError as e:
            failed += 1
            print(f"\n❌ {e}")

    if args.html_dir:
        results.extend(process_saved_html_files(args.html_dir, args.base_url))

    if args.json:
        print(f"\n{'='*70}")
        print("JSON Results:")
        print(f"{'='*70}")
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
