from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from download_badges.config import REQUEST_TIMEOUT_SECONDS
from download_badges.errors import (
    ConfigurationGapError,
    NotFoundError,
    RateLimitedError,
    SchemaValidationError,
    TransportError,
)

logger = logging.getLogger("download_badges.services")

ModelT = TypeVar("ModelT", bound=BaseModel)
EntryT = TypeVar("EntryT")


@dataclass(frozen=True)
class Route:
    """Where a service is mounted and which path parameters it accepts."""

    base: str
    pattern: str
    summary: str


def resolve_interval(table: Mapping[str, EntryT], interval: str | Enum) -> EntryT:
    key = interval.value if isinstance(interval, Enum) else interval
    try:
        return table[key]
    except KeyError as exc:
        raise ConfigurationGapError(
            f"Interval {key!r} is routed but missing from the interval table"
        ) from exc


class BaseJsonService:
    """One badge service: fetches JSON from a single upstream and validates it."""

    route: Route
    default_label = "downloads"

    def __init__(self, timeout_seconds: int = REQUEST_TIMEOUT_SECONDS):
        self.timeout_seconds = timeout_seconds

    def _request_payload(
        self, url: str, *, params: Mapping[str, Any] | None = None
    ) -> Any:
        logger.debug("requesting url=%s params=%s", url, params)
        try:
            response = requests.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("upstream request failed url=%s error=%s", url, exc)
            raise TransportError(str(exc)) from exc

        if response.status_code == 404:
            raise NotFoundError(f"HTTP 404 for GET {url}")
        if response.status_code == 429:
            raise RateLimitedError(f"HTTP 429 for GET {url}")
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.warning(
                "upstream returned status=%s url=%s", response.status_code, url
            )
            raise TransportError(f"HTTP {response.status_code} for GET {url}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Response from {url} was not valid JSON") from exc

    def _request_json(
        self,
        schema: type[ModelT],
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> ModelT:
        payload = self._request_payload(url, params=params)
        return self._validate(schema, payload, url=url)

    def _validate(self, schema: type[ModelT], payload: Any, *, url: str) -> ModelT:
        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            logger.warning("invalid response data url=%s errors=%s", url, exc.errors())
            raise SchemaValidationError(
                f"Response from {url} does not match {schema.__name__}",
                context={"errors": exc.errors(include_url=False)},
            ) from exc
