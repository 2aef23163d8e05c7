"""Data models for the scraper layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass
class RawPage:
    """The raw HTTP response for a single storefront fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ProductOutcome:
    """What happened when one product endpoint was harvested.

    Exactly one of ``record`` / ``error`` is meaningful: ``record`` holds the
    parsed structured-data object on success, ``error`` a short description
    of the failure otherwise.
    """

    endpoint: str
    record: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def successful_records(outcomes: Iterable[ProductOutcome]) -> List[Any]:
    """Return the records of the successful outcomes, in input order."""
    return [o.record for o in outcomes if o.ok]


def failed_endpoints(outcomes: Iterable[ProductOutcome]) -> List[str]:
    return [o.endpoint for o in outcomes if not o.ok]
