"""Shared fixtures: an isolated Settings object pointed at a fake storefront."""

from __future__ import annotations

import pytest

from harvest.config import Settings

ORIGIN = "https://shop.test"


@pytest.fixture
def cfg(tmp_path) -> Settings:
    """Settings targeting ``ORIGIN`` with no product delay and a tmp snapshot."""
    return Settings(
        site_origin=ORIGIN,
        listing_endpoint="/collections/all",
        output_path=tmp_path / "data.json",
        product_delay=0.0,
        request_timeout=5.0,
        max_concurrent_fetches=2,
        user_agent="test-agent",
        page_selector=".page",
        product_link_selector="a.grid-product__link",
        placeholder_href="{{url}}",
        structured_data_selector='script[type="application/ld+json"]',
    )
