"""High-level runner for the harvest pipeline.

``run_pipeline`` sequences the stages:

    discover pages → extract product links → fetch product details → snapshot

Each stage finishes before the next begins.  The snapshot is written only
once every stage has completed, so a failed run leaves the previous snapshot
untouched.
"""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from harvest.config import Settings, settings as _default_settings
from harvest.pipeline.discovery import get_all_pages
from harvest.pipeline.links import get_items_on_pages
from harvest.pipeline.products import fetch_product_details
from harvest.pipeline.snapshot import build_catalog, write_snapshot
from harvest.scraper.fetcher import open_client
from harvest.scraper.models import ProductOutcome, failed_endpoints, successful_records


class PipelineMode(str, enum.Enum):
    """Which stages run and what the snapshot contains."""

    DISCOVER = "discover"  # compact JSON array of product endpoints
    FULL = "full"  # pretty-printed {totalProducts, products}


@dataclass
class PipelineResult:
    """Everything a run produced, including the per-product outcomes."""

    mode: PipelineMode
    pages: List[str]
    links: List[str]
    snapshot: Any
    output_path: Path
    outcomes: List[ProductOutcome] = field(default_factory=list)

    @property
    def records(self) -> List[Any]:
        return successful_records(self.outcomes)

    @property
    def failures(self) -> List[str]:
        return failed_endpoints(self.outcomes)


async def run_pipeline(
    mode: PipelineMode = PipelineMode.FULL,
    settings: Optional[Settings] = None,
) -> PipelineResult:
    """Run the harvest end to end and write the snapshot.

    Args:
        mode: :attr:`PipelineMode.DISCOVER` stops after link extraction and
            writes the endpoint list; :attr:`PipelineMode.FULL` also fetches
            every product and writes the catalog object.
        settings: Override the module-level settings (origin, output path,
            delays, selectors).

    Returns:
        The :class:`PipelineResult` of the run.

    Raises:
        httpx.HTTPError: If discovery or link extraction fails.  Nothing is
            written in that case.
    """
    cfg = settings or _default_settings
    mode = PipelineMode(mode)
    print(f"[PIPELINE] Starting {mode.value} harvest of {cfg.site_origin} …")

    outcomes: List[ProductOutcome] = []
    async with open_client(cfg) as client:
        pages = await get_all_pages(client, cfg)
        links = await get_items_on_pages(client, pages, cfg)

        if mode is PipelineMode.FULL:
            outcomes = await fetch_product_details(client, links, cfg)
            snapshot: Any = build_catalog(successful_records(outcomes))
        else:
            snapshot = links

    cfg.ensure_output_dir()
    path = write_snapshot(snapshot, cfg.output_path, pretty=mode is PipelineMode.FULL)
    print(f"[PIPELINE] Done → {path}")

    return PipelineResult(
        mode=mode,
        pages=pages,
        links=links,
        snapshot=snapshot,
        output_path=path,
        outcomes=outcomes,
    )


def harvest(
    mode: PipelineMode = PipelineMode.FULL,
    settings: Optional[Settings] = None,
) -> PipelineResult:
    """Blocking wrapper around :func:`run_pipeline` for scripts and the CLI."""
    return asyncio.run(run_pipeline(mode, settings))
