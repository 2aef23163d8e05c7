"""Page discovery: lists the storefront's collection pages."""

from __future__ import annotations

from typing import List, Optional

import httpx

from harvest.config import Settings, settings as _default_settings
from harvest.scraper.extractor import extract_page_endpoints
from harvest.scraper.fetcher import fetch_page


async def get_all_pages(
    client: httpx.AsyncClient,
    settings: Optional[Settings] = None,
) -> List[str]:
    """Fetch the listing page and return every collection-page endpoint on it.

    Network and parse errors propagate to the caller; a run cannot proceed
    without the page list.
    """
    cfg = settings or _default_settings
    print(f"[DISCOVERY] Fetching listing {cfg.listing_endpoint!r} …")
    raw = await fetch_page(client, cfg.listing_endpoint, cfg)
    pages = extract_page_endpoints(raw.html, cfg)
    print(f"[DISCOVERY] Found {len(pages)} collection page(s).")
    return pages
