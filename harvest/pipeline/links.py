"""Link extraction: collects product endpoints from collection pages.

Pages are fetched concurrently, bounded by
``settings.max_concurrent_fetches``.  Results are assembled in the order of
the input endpoints, not in the order responses arrive, so the flattened
output is deterministic for a given catalog.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import List, Optional, Sequence

import httpx

from harvest.config import Settings, settings as _default_settings
from harvest.scraper.extractor import extract_product_links
from harvest.scraper.fetcher import fetch_page


def _limiter(limit: int) -> contextlib.AbstractAsyncContextManager:
    """Return an async context manager enforcing *limit* concurrent fetches."""
    if limit > 0:
        return asyncio.Semaphore(limit)
    return contextlib.nullcontext()


async def get_item_links(
    client: httpx.AsyncClient,
    collection_endpoint: str,
    settings: Optional[Settings] = None,
) -> List[str]:
    """Return the product endpoints listed on a single collection page."""
    cfg = settings or _default_settings
    raw = await fetch_page(client, collection_endpoint, cfg)
    links = extract_product_links(raw.html, cfg)
    print(f"[LINKS] {collection_endpoint} → {len(links)} product link(s).")
    return links


async def get_items_on_pages(
    client: httpx.AsyncClient,
    endpoints: Sequence[str],
    settings: Optional[Settings] = None,
) -> List[str]:
    """Fetch every collection page and return all product endpoints, flattened.

    Per-page order and input order are both preserved; duplicates are kept.
    The join is all-or-nothing: the first failing page raises and the whole
    extraction fails with it.
    """
    cfg = settings or _default_settings
    limiter = _limiter(cfg.max_concurrent_fetches)

    async def bounded(endpoint: str) -> List[str]:
        async with limiter:
            return await get_item_links(client, endpoint, cfg)

    per_page = await asyncio.gather(*(bounded(e) for e in endpoints))

    links = [link for page_links in per_page for link in page_links]
    print(f"[LINKS] {len(links)} product link(s) across {len(per_page)} page(s).")
    return links
