from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Path
from fastapi.middleware.cors import CORSMiddleware

from download_badges.badges import render_error_badge
from download_badges.errors import BadgeServiceError
from download_badges.models import BadgeData
from download_badges.services.base import BaseJsonService
from download_badges.services.dub import DubDownloads, DubInterval
from download_badges.services.wordpress import (
    DOWNLOAD_SERVICES,
    EXTENSION_DATA,
    INSTALL_SERVICES,
    WordpressDownloads,
    WordpressInstalls,
    WordpressInterval,
)
from download_badges.utils.logging import configure_logging


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging()
    yield


app = FastAPI(title="Download Badges API", version="0.1.0", lifespan=lifespan)
logger = logging.getLogger("download_badges.api")

ServiceT = TypeVar("ServiceT", bound=BaseJsonService)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_request_start(request, call_next):
    logger.info(
        "request sent method=%s path=%s query=%s",
        request.method,
        request.url.path,
        request.url.query,
    )
    return await call_next(request)


def _service(service_cls: type[ServiceT]) -> ServiceT:
    return service_cls()


def _badge_response(
    service_cls: type[ServiceT], handle: Callable[[ServiceT], BadgeData]
) -> dict[str, Any]:
    service = _service(service_cls)
    try:
        badge = handle(service)
    except BadgeServiceError as exc:
        logger.warning("badge failed service=%s error=%s", service_cls.__name__, exc)
        badge = render_error_badge(exc, service_cls.default_label)
    return badge.to_endpoint_json()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


DUB_PATH = f"/{DubDownloads.route.base}/{DubDownloads.route.pattern}"


@app.get(DUB_PATH, summary=DubDownloads.route.summary)
def dub_downloads(
    interval: DubInterval,
    package_name: str = Path(..., examples=["vibe-d"]),
) -> dict[str, Any]:
    return _badge_response(
        DubDownloads, lambda service: service.handle(interval, package_name)
    )


@app.get(
    f"{DUB_PATH}/{{version:path}}",
    summary=f"{DubDownloads.route.summary} (specific version)",
)
def dub_version_downloads(
    interval: DubInterval,
    package_name: str = Path(..., examples=["vibe-d"]),
    version: str = Path(
        ...,
        description="This can either be a numeric version like `0.8.4` or the string `latest`",
        examples=["0.8.4"],
    ),
) -> dict[str, Any]:
    return _badge_response(
        DubDownloads,
        lambda service: service.handle(interval, package_name, version),
    )


def _wordpress_installs_endpoint(
    service_cls: type[WordpressInstalls],
) -> Callable[..., dict[str, Any]]:
    example = EXTENSION_DATA[service_cls.extension_type].example_slug

    def endpoint(slug: str = Path(..., examples=[example])) -> dict[str, Any]:
        return _badge_response(service_cls, lambda service: service.handle(slug))

    return endpoint


def _wordpress_downloads_endpoint(
    service_cls: type[WordpressDownloads],
) -> Callable[..., dict[str, Any]]:
    example = EXTENSION_DATA[service_cls.extension_type].example_slug

    def endpoint(
        interval: WordpressInterval, slug: str = Path(..., examples=[example])
    ) -> dict[str, Any]:
        return _badge_response(
            service_cls, lambda service: service.handle(interval, slug)
        )

    return endpoint


# Installs routes go first so "installs" is never parsed as an interval.
for _installs_cls in INSTALL_SERVICES.values():
    app.add_api_route(
        f"/{_installs_cls.route.base}/{_installs_cls.route.pattern}",
        _wordpress_installs_endpoint(_installs_cls),
        methods=["GET"],
        summary=_installs_cls.route.summary,
        name=_installs_cls.__name__,
    )

for _downloads_cls in DOWNLOAD_SERVICES.values():
    app.add_api_route(
        f"/{_downloads_cls.route.base}/{_downloads_cls.route.pattern}",
        _wordpress_downloads_endpoint(_downloads_cls),
        methods=["GET"],
        summary=_downloads_cls.route.summary,
        name=_downloads_cls.__name__,
    )
