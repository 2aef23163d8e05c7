"""Harvest pipeline package.

Public API::

    from harvest.pipeline import harvest, PipelineMode
    result = harvest(PipelineMode.FULL)
"""

from harvest.pipeline.runner import PipelineMode, PipelineResult, harvest, run_pipeline
from harvest.pipeline.snapshot import read_snapshot, write_snapshot

__all__ = [
    "harvest",
    "run_pipeline",
    "PipelineMode",
    "PipelineResult",
    "read_snapshot",
    "write_snapshot",
]
