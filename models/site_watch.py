"""Data models for the monitor configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class SiteWatch:
    """A single product page watched for an out-of-stock marker."""

    url: str
    name: str
    interval_ms: int
    out_of_stock_marker: str

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Webhook target plus the ordered list of watched sites."""

    webhook_url: str
    sites: Tuple[SiteWatch, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.sites, tuple):
            object.__setattr__(self, "sites", tuple(self.sites))
