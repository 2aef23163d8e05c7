"""Centralised settings for the catalog harvester.

Every knob the harvester has (target storefront, snapshot location, request
pacing, theme selectors) is a field on :class:`Settings`.  Each field reads a
``HARVEST_*`` environment variable, and a `.env` beside the package is loaded
first without clobbering the real environment.  Unset fields fall back to the
Maggie's Dog Wellness storefront defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urljoin, urlparse

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Target storefront
    # ------------------------------------------------------------------
    site_origin: str = field(
        default_factory=lambda: os.environ.get(
            "HARVEST_SITE_ORIGIN", "https://maggiesdogwellness.com"
        )
    )
    listing_endpoint: str = field(
        default_factory=lambda: os.environ.get("HARVEST_LISTING_ENDPOINT", "/collections/all")
    )

    # ------------------------------------------------------------------
    # Snapshot output
    # ------------------------------------------------------------------
    output_path: Path = field(
        default_factory=lambda: Path(os.environ.get("HARVEST_OUTPUT_PATH", "data.json"))
    )

    # ------------------------------------------------------------------
    # HTTP behaviour
    # ------------------------------------------------------------------
    product_delay: float = field(
        default_factory=lambda: float(os.environ.get("HARVEST_PRODUCT_DELAY", "1.0"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("HARVEST_REQUEST_TIMEOUT", "30.0"))
    )
    # 0 lifts the ceiling entirely (one in-flight request per collection page).
    max_concurrent_fetches: int = field(
        default_factory=lambda: int(os.environ.get("HARVEST_MAX_CONCURRENT_FETCHES", "5"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "HARVEST_USER_AGENT",
            "Mozilla/5.0 (compatible; CatalogHarvest/0.1; +https://github.com/catalog-harvest)",
        )
    )

    # ------------------------------------------------------------------
    # Markup selectors (coupled to the storefront theme)
    # ------------------------------------------------------------------
    page_selector: str = field(
        default_factory=lambda: os.environ.get("HARVEST_PAGE_SELECTOR", ".page")
    )
    product_link_selector: str = field(
        default_factory=lambda: os.environ.get(
            "HARVEST_PRODUCT_LINK_SELECTOR", "a.grid-product__link"
        )
    )
    placeholder_href: str = field(
        default_factory=lambda: os.environ.get("HARVEST_PLACEHOLDER_HREF", "{{url}}")
    )
    structured_data_selector: str = field(
        default_factory=lambda: os.environ.get(
            "HARVEST_STRUCTURED_DATA_SELECTOR", 'script[type="application/ld+json"]'
        )
    )

    def url_for(self, endpoint: str) -> str:
        """Return the absolute URL for *endpoint* on :attr:`site_origin`.

        Endpoints that are already absolute URLs are returned unchanged.
        """
        if urlparse(endpoint).scheme:
            return endpoint
        return urljoin(self.site_origin.rstrip("/") + "/", endpoint.lstrip("/"))

    def ensure_output_dir(self) -> None:
        """Create the snapshot's parent directory if it does not exist."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)


# Module-level singleton, import this everywhere:
#   from harvest.config import settings
settings = Settings()
