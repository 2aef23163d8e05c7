"""Markup extraction: pulls endpoints and structured data out of storefront HTML.

All functions here are pure; they take the page HTML and the settings that
carry the theme-specific CSS selectors.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from bs4 import BeautifulSoup

from harvest.config import Settings, settings as _default_settings


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def extract_page_endpoints(html: str, settings: Optional[Settings] = None) -> List[str]:
    """Return the collection-page endpoints listed on the "all collections" page.

    Every element matching ``settings.page_selector`` contributes one entry,
    in document order: the ``href`` of its first ``<a>``, or
    ``settings.listing_endpoint`` when the element has no usable link (the
    current page is usually rendered without an anchor).
    """
    cfg = settings or _default_settings
    pages: List[str] = []
    for element in _soup(html).select(cfg.page_selector):
        anchor = element.find("a")
        href = anchor.get("href") if anchor is not None else None
        pages.append(href if href is not None else cfg.listing_endpoint)
    return pages


def extract_product_links(html: str, settings: Optional[Settings] = None) -> List[str]:
    """Return the product-detail endpoints linked from a collection page.

    Anchors without an ``href`` and anchors still carrying the unrendered
    template placeholder (``settings.placeholder_href``) are skipped.
    Duplicates are kept.
    """
    cfg = settings or _default_settings
    links: List[str] = []
    for anchor in _soup(html).select(cfg.product_link_selector):
        href = anchor.get("href")
        if href is None or href == cfg.placeholder_href:
            continue
        links.append(href)
    return links


def extract_structured_data(html: str, settings: Optional[Settings] = None) -> Any:
    """Parse the first embedded structured-data block (JSON-LD) on a product page.

    Raises:
        ValueError: If the page has no matching block.
        json.JSONDecodeError: If the block's text is not valid JSON.
    """
    cfg = settings or _default_settings
    block = _soup(html).select_one(cfg.structured_data_selector)
    if block is None:
        raise ValueError(f"No structured data block matching {cfg.structured_data_selector!r}")
    return json.loads(block.string or block.get_text())
