from __future__ import annotations

import httpx
import pytest


class FakeNacos:
    """Replays queued responses per path and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queues: dict[str, list] = {}

    def queue(self, path: str, *responses) -> None:
        self._queues.setdefault(path, []).extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self._queues.get(request.url.path) or []
        if not queued:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        item = queued.pop(0)
        if isinstance(item, httpx.RequestError):
            item.request = request
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item
        return httpx.Response(200, content=item)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_nacos() -> FakeNacos:
    return FakeNacos()
