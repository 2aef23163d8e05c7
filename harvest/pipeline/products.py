"""Product detail fetch: harvests the structured data of each product page.

Products are fetched strictly one after another, each preceded by a fixed
``settings.product_delay`` pause.  A failing product never aborts the run:
it is logged and reported as a failed :class:`ProductOutcome`.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

import httpx

from harvest.config import Settings, settings as _default_settings
from harvest.scraper.extractor import extract_structured_data
from harvest.scraper.fetcher import fetch_page
from harvest.scraper.models import ProductOutcome


async def fetch_product(
    client: httpx.AsyncClient,
    endpoint: str,
    settings: Optional[Settings] = None,
) -> ProductOutcome:
    """Harvest one product page, converting any failure into an outcome."""
    cfg = settings or _default_settings
    try:
        raw = await fetch_page(client, endpoint, cfg)
        record = extract_structured_data(raw.html, cfg)
    except Exception as exc:
        print(f"[PRODUCTS] ✗ Failed {endpoint!r}: {exc}")
        return ProductOutcome(endpoint=endpoint, error=f"{type(exc).__name__}: {exc}")

    print(f"[PRODUCTS] ✓ {endpoint}")
    return ProductOutcome(endpoint=endpoint, record=record)


async def fetch_product_details(
    client: httpx.AsyncClient,
    endpoints: Sequence[str],
    settings: Optional[Settings] = None,
) -> List[ProductOutcome]:
    """Return one :class:`ProductOutcome` per endpoint, in input order.

    Use :func:`~harvest.scraper.models.successful_records` for the plain list
    of parsed records.
    """
    cfg = settings or _default_settings
    outcomes: List[ProductOutcome] = []

    for index, endpoint in enumerate(endpoints, start=1):
        await asyncio.sleep(cfg.product_delay)
        print(f"[PRODUCTS] ({index}/{len(endpoints)}) {endpoint}")
        outcomes.append(await fetch_product(client, endpoint, cfg))

    failures = sum(1 for o in outcomes if not o.ok)
    print(f"[PRODUCTS] {len(outcomes) - failures} record(s) harvested, {failures} failure(s).")
    return outcomes
