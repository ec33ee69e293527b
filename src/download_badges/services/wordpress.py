from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from download_badges.badges import render_downloads_badge
from download_badges.config import WORDPRESS_API_BASE
from download_badges.errors import NotFoundError
from download_badges.models import BadgeData, WordpressDownloadHistory, WordpressInfo
from download_badges.services.base import BaseJsonService, Route, resolve_interval


class ExtensionType(str, Enum):
    plugin = "plugin"
    theme = "theme"


class WordpressInterval(str, Enum):
    dd = "dd"
    dw = "dw"
    dm = "dm"
    dy = "dy"
    dt = "dt"


@dataclass(frozen=True)
class ExtensionData:
    capt: str
    example_slug: str


EXTENSION_DATA: dict[str, ExtensionData] = {
    "plugin": ExtensionData(capt="Plugin", example_slug="bbpress"),
    "theme": ExtensionData(capt="Theme", example_slug="twentyseventeen"),
}


@dataclass(frozen=True)
class WordpressIntervalEntry:
    # None means the running total from the info endpoint.
    limit: int | None
    interval: str = ""


INTERVAL_MAP: dict[str, WordpressIntervalEntry] = {
    "dd": WordpressIntervalEntry(limit=1, interval="day"),
    "dw": WordpressIntervalEntry(limit=7, interval="week"),
    "dm": WordpressIntervalEntry(limit=30, interval="month"),
    "dy": WordpressIntervalEntry(limit=365, interval="year"),
    "dt": WordpressIntervalEntry(limit=None),
}


def sum_daily_downloads(history: WordpressDownloadHistory) -> int:
    return sum(int(count) for count in history.root.values())


class BaseWordpress(BaseJsonService):
    extension_type: str

    def __init__(self, base_url: str = WORDPRESS_API_BASE, **kwargs):
        super().__init__(**kwargs)
        self.base_url = base_url

    def fetch(self, extension_type: str, slug: str) -> WordpressInfo:
        """Fetch plugin/theme info carrying the download total and active installs."""
        url = f"{self.base_url}/{extension_type}s/info/1.2/"
        params = {
            "action": f"{extension_type}_information",
            "request[slug]": slug,
            "request[fields][active_installs]": 1,
            "request[fields][downloaded]": 1,
            "request[fields][sections]": 0,
            "request[fields][homepage]": 0,
            "request[fields][tags]": 0,
            "request[fields][screenshot_url]": 0,
        }
        payload = self._request_payload(url, params=params)
        if isinstance(payload, dict) and payload.get("error"):
            raise NotFoundError(f"{extension_type} {slug!r}: {payload['error']}")
        return self._validate(WordpressInfo, payload, url=url)

    def fetch_download_history(
        self, extension_type: str, slug: str, limit: int
    ) -> WordpressDownloadHistory:
        ext_type = "plugin" if extension_type == "plugin" else "themes"
        url = f"{self.base_url}/stats/{ext_type}/1.0/downloads.php"
        return self._request_json(
            WordpressDownloadHistory, url, params={"slug": slug, "limit": limit}
        )


class WordpressDownloads(BaseWordpress):
    default_label = "downloads"

    @classmethod
    def render(cls, *, interval: WordpressInterval | str, downloads: int) -> BadgeData:
        return render_downloads_badge(
            downloads,
            interval=resolve_interval(INTERVAL_MAP, interval).interval,
            label=cls.default_label,
        )

    def handle(self, interval: WordpressInterval | str, slug: str) -> BadgeData:
        limit = resolve_interval(INTERVAL_MAP, interval).limit
        if limit is None:
            downloads = self.fetch(self.extension_type, slug).downloaded
        else:
            history = self.fetch_download_history(self.extension_type, slug, limit)
            downloads = sum_daily_downloads(history)
        return self.render(interval=interval, downloads=downloads)


class WordpressInstalls(BaseWordpress):
    default_label = "active installs"

    def handle(self, slug: str) -> BadgeData:
        info = self.fetch(self.extension_type, slug)
        return render_downloads_badge(info.active_installs, label=self.default_label)


def downloads_for_extension_type(extension_type: str) -> type[WordpressDownloads]:
    capt = EXTENSION_DATA[extension_type].capt
    return type(
        f"Wordpress{capt}Downloads",
        (WordpressDownloads,),
        {
            "extension_type": extension_type,
            "route": Route(
                base=f"wordpress/{extension_type}",
                pattern="{interval}/{slug}",
                summary=f"WordPress {capt} Downloads",
            ),
        },
    )


def installs_for_extension_type(extension_type: str) -> type[WordpressInstalls]:
    capt = EXTENSION_DATA[extension_type].capt
    return type(
        f"Wordpress{capt}Installs",
        (WordpressInstalls,),
        {
            "extension_type": extension_type,
            "route": Route(
                base=f"wordpress/{extension_type}/installs",
                pattern="{slug}",
                summary=f"WordPress {capt} Active Installs",
            ),
        },
    )


DOWNLOAD_SERVICES = {
    extension_type: downloads_for_extension_type(extension_type)
    for extension_type in EXTENSION_DATA
}
INSTALL_SERVICES = {
    extension_type: installs_for_extension_type(extension_type)
    for extension_type in EXTENSION_DATA
}
