from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from download_badges.services import base


class FakeGet:
    """Stands in for requests.get; replays queued responses in order."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._queue: list[requests.Response | Exception] = []

    def queue_json(self, payload: Any, status_code: int = 200) -> None:
        self.queue_text(json.dumps(payload), status_code=status_code)

    def queue_text(self, body: str, status_code: int = 200) -> None:
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        response.url = "https://upstream.test/"
        self._queue.append(response)

    def queue_error(self, exc: Exception) -> None:
        self._queue.append(exc)

    def __call__(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_get(monkeypatch) -> FakeGet:
    fake = FakeGet()
    monkeypatch.setattr(base.requests, "get", fake)
    return fake
