from __future__ import annotations

import logging

import httpx

from .config_types import ClientConfig
from .errors import TransportError

log = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            headers={"User-Agent": "nacos-watch/0.1.0"},
            transport=transport,
            follow_redirects=False,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        log.debug("%s %s params=%s", method, path, sorted((params or {}).keys()))
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            r = await self._client.request(method, path, params=params, headers=headers, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {path} failed: {e}", method=method, path=path) from e

        if not r.is_success:
            details = r.text[:1000] if r.content else None
            raise TransportError(
                f"{method} {path} failed with {r.status_code}",
                status_code=r.status_code,
                details=details,
                method=method,
                path=path,
            )

        return r.content
