"""Async HTTP fetcher for storefront pages."""

from __future__ import annotations

from typing import Optional

import httpx

from harvest.config import Settings, settings as _default_settings
from harvest.scraper.models import RawPage


def open_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """Return an :class:`httpx.AsyncClient` configured from *settings*.

    The caller owns the client and should use it as an async context manager
    so the connection pool is closed once the run finishes.
    """
    cfg = settings or _default_settings
    return httpx.AsyncClient(
        headers={"User-Agent": cfg.user_agent},
        timeout=cfg.request_timeout,
        follow_redirects=True,
    )


async def fetch_page(
    client: httpx.AsyncClient,
    endpoint: str,
    settings: Optional[Settings] = None,
) -> RawPage:
    """GET *endpoint* on the configured storefront and return a :class:`RawPage`.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: On transport failures (DNS, connection, timeout).
    """
    cfg = settings or _default_settings
    url = cfg.url_for(endpoint)

    response = await client.get(url)
    response.raise_for_status()

    return RawPage(url=url, html=response.text, status_code=response.status_code)
