"""Scraper package — storefront fetch & markup extraction."""

from harvest.scraper.extractor import (
    extract_page_endpoints,
    extract_product_links,
    extract_structured_data,
)
from harvest.scraper.fetcher import fetch_page, open_client
from harvest.scraper.models import ProductOutcome, RawPage, successful_records

__all__ = [
    "fetch_page",
    "open_client",
    "extract_page_endpoints",
    "extract_product_links",
    "extract_structured_data",
    "RawPage",
    "ProductOutcome",
    "successful_records",
]
