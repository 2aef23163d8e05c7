"""Catalog harvester CLI — entry-point for pipeline runs.

Usage:
    python cli/main.py --help

Commands:
    run    → full pipeline (or discovery only) and snapshot write
    pages  → list collection pages
    links  → list product endpoints
    show   → summarise an existing snapshot
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from harvest.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import dataclasses
from typing import Optional

import typer

from harvest.config import Settings, settings

app = typer.Typer(
    name="harvest",
    help="Storefront catalog harvester.",
    no_args_is_help=True,
)


def _settings_with(origin: Optional[str] = None, output: Optional[Path] = None) -> Settings:
    """Return the global settings with any CLI overrides applied."""
    overrides: dict = {}
    if origin:
        overrides["site_origin"] = origin
    if output:
        overrides["output_path"] = output
    return dataclasses.replace(settings, **overrides) if overrides else settings


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------
@app.command("run")
def run(
    mode: str = typer.Option("full", help="Pipeline mode: full | discover."),
    output: Optional[Path] = typer.Option(None, help="Snapshot file to write."),
    origin: Optional[str] = typer.Option(None, help="Storefront origin URL."),
) -> None:
    """Harvest the catalog and write the JSON snapshot."""
    from harvest.pipeline import PipelineMode, harvest

    try:
        pipeline_mode = PipelineMode(mode)
    except ValueError:
        typer.echo(f"[run] Unknown mode {mode!r}. Use: full | discover")
        raise typer.Exit(1)

    cfg = _settings_with(origin, output)
    try:
        result = harvest(pipeline_mode, cfg)
    except Exception as exc:
        typer.echo(f"[run] ✗ Harvest failed: {exc}")
        raise typer.Exit(1)

    typer.echo(f"[run] Pages    : {len(result.pages)}")
    typer.echo(f"[run] Links    : {len(result.links)}")
    if result.mode is PipelineMode.FULL:
        typer.echo(f"[run] Products : {len(result.records)}")
        typer.echo(f"[run] Failures : {len(result.failures)}")
        for endpoint in result.failures:
            typer.echo(f"  ✗ {endpoint}")
    typer.echo(f"[run] Snapshot : {result.output_path}")


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------
@app.command("pages")
def pages(
    origin: Optional[str] = typer.Option(None, help="Storefront origin URL."),
) -> None:
    """Print the collection pages found on the listing page."""
    from harvest.pipeline.discovery import get_all_pages
    from harvest.scraper import open_client

    cfg = _settings_with(origin)

    async def _run() -> list[str]:
        async with open_client(cfg) as client:
            return await get_all_pages(client, cfg)

    try:
        found = asyncio.run(_run())
    except Exception as exc:
        typer.echo(f"[pages] ✗ Discovery failed: {exc}")
        raise typer.Exit(code=1)

    for page in found:
        typer.echo(f"  {page}")


@app.command("links")
def links(
    origin: Optional[str] = typer.Option(None, help="Storefront origin URL."),
) -> None:
    """Print every product endpoint listed across the collection pages."""
    from harvest.pipeline.discovery import get_all_pages
    from harvest.pipeline.links import get_items_on_pages
    from harvest.scraper import open_client

    cfg = _settings_with(origin)

    async def _run() -> list[str]:
        async with open_client(cfg) as client:
            found = await get_all_pages(client, cfg)
            return await get_items_on_pages(client, found, cfg)

    try:
        product_links = asyncio.run(_run())
    except Exception as exc:
        typer.echo(f"[links] ✗ Link extraction failed: {exc}")
        raise typer.Exit(code=1)

    for link in product_links:
        typer.echo(f"  {link}")


@app.command("show")
def show(
    path: Optional[Path] = typer.Option(None, help="Snapshot file to read."),
) -> None:
    """Read a snapshot back and print a short summary."""
    from harvest.pipeline import read_snapshot

    target = path or settings.output_path
    if not target.exists():
        typer.echo(f"[show] No snapshot at {target}.")
        raise typer.Exit(1)

    try:
        data = read_snapshot(target)
    except ValueError as exc:
        typer.echo(f"[show] ✗ Unreadable snapshot {target}: {exc}")
        raise typer.Exit(code=1)

    if isinstance(data, list):
        typer.echo(f"[show] Endpoint list: {len(data)} entr{'y' if len(data) == 1 else 'ies'}.")
        for endpoint in data:
            typer.echo(f"  {endpoint}")
        return

    if not isinstance(data, dict):
        typer.echo(f"[show] ✗ Unexpected snapshot content in {target}: {type(data).__name__}")
        raise typer.Exit(code=1)

    products = data.get("products", [])
    typer.echo(f"[show] Catalog: {data.get('totalProducts', len(products))} product(s).")
    for product in products:
        name = product.get("name") if isinstance(product, dict) else None
        typer.echo(f"  {name or '(unnamed)'}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
