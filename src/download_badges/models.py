from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt, RootModel


@dataclass(frozen=True)
class BadgeData:
    label: str
    message: str
    color: str
    is_error: bool = False

    def to_endpoint_json(self) -> dict[str, Any]:
        # shields.io "endpoint" badge format
        return {
            "schemaVersion": 1,
            "label": self.label,
            "message": self.message,
            "color": self.color,
            "isError": self.is_error,
        }


class DubDownloadCounts(BaseModel):
    total: NonNegativeInt
    monthly: NonNegativeInt
    weekly: NonNegativeInt
    daily: NonNegativeInt


class DubStats(BaseModel):
    model_config = ConfigDict(extra="ignore")

    downloads: DubDownloadCounts


class WordpressInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    downloaded: NonNegativeInt
    active_installs: NonNegativeInt


class WordpressDownloadHistory(RootModel[dict[date, NonNegativeInt]]):
    """Per-day download counts keyed by ISO date; numeric strings are accepted."""
