from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from download_badges.badges import render_downloads_badge
from download_badges.config import DUB_API_BASE
from download_badges.models import BadgeData, DubStats
from download_badges.services.base import BaseJsonService, Route, resolve_interval


class DubInterval(str, Enum):
    dd = "dd"
    dw = "dw"
    dm = "dm"
    dt = "dt"


@dataclass(frozen=True)
class DubIntervalEntry:
    transform: Callable[[DubStats], int]
    interval: str


INTERVAL_MAP: dict[str, DubIntervalEntry] = {
    "dd": DubIntervalEntry(
        transform=lambda stats: stats.downloads.daily, interval="day"
    ),
    "dw": DubIntervalEntry(
        transform=lambda stats: stats.downloads.weekly, interval="week"
    ),
    "dm": DubIntervalEntry(
        transform=lambda stats: stats.downloads.monthly, interval="month"
    ),
    "dt": DubIntervalEntry(
        transform=lambda stats: stats.downloads.total, interval=""
    ),
}


class DubDownloads(BaseJsonService):
    route = Route(
        base="dub",
        pattern="{interval}/{package_name}",
        summary="DUB Downloads",
    )
    default_label = "downloads"

    def __init__(self, base_url: str = DUB_API_BASE, **kwargs):
        super().__init__(**kwargs)
        self.base_url = base_url

    @classmethod
    def render(
        cls, *, interval: DubInterval | str, downloads: int, version: str | None = None
    ) -> BadgeData:
        return render_downloads_badge(
            downloads,
            version=version,
            interval=resolve_interval(INTERVAL_MAP, interval).interval,
            label=cls.default_label,
        )

    def fetch(self, package_name: str, version: str | None = None) -> DubStats:
        url = f"{self.base_url}/packages/{package_name}"
        if version:
            url += f"/{version}"
        url += "/stats"
        return self._request_json(DubStats, url)

    def handle(
        self,
        interval: DubInterval | str,
        package_name: str,
        version: str | None = None,
    ) -> BadgeData:
        entry = resolve_interval(INTERVAL_MAP, interval)
        stats = self.fetch(package_name, version)
        downloads = entry.transform(stats)
        return self.render(interval=interval, downloads=downloads, version=version)
