"""Snapshot IO: persists the harvested catalog as a local JSON document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Sequence

from harvest.config import settings


def build_catalog(records: Sequence[Any]) -> dict:
    """Wrap *records* in the full-snapshot envelope."""
    return {"totalProducts": len(records), "products": list(records)}


def write_snapshot(data: Any, path: Optional[Path] = None, *, pretty: bool = False) -> Path:
    """Serialise *data* to JSON and overwrite the snapshot file.

    Args:
        data: Any JSON-serialisable value (endpoint list or catalog object).
        path: Override the destination.  Defaults to ``settings.output_path``.
        pretty: Indent with two spaces instead of the compact form.

    Returns:
        The path that was written.
    """
    target = Path(path) if path is not None else settings.output_path
    if pretty:
        text = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    target.write_text(text, encoding="utf-8")
    print(f"[SNAPSHOT] Wrote {target} ({len(text)} chars).")
    return target


def read_snapshot(path: Optional[Path] = None) -> Any:
    """Load a snapshot previously written by :func:`write_snapshot`."""
    target = Path(path) if path is not None else settings.output_path
    return json.loads(target.read_text(encoding="utf-8"))
