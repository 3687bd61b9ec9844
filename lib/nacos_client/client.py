from __future__ import annotations

import logging

import httpx

from .config_types import ClientConfig
from .fingerprint import FingerprintCache, fingerprint
from .protocol import (
    CONFIGS_PATH,
    LISTENER_PATH,
    LISTENING_CONFIGS_PARAM,
    LONG_POLL_HEADER,
    build_listening_configs,
    config_params,
    ensure_wire_safe,
)
from .transport import Transport

log = logging.getLogger(__name__)


class NacosClient:
    """Nacos config client without authentication.

    The first ``wait_for_new_config`` call for a data id returns the current
    value; later calls block on the listener endpoint until it changes.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._t = Transport(cfg, transport=transport)
        self._fingerprints = FingerprintCache()

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> NacosClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def fingerprint_of(self, data_id: str) -> str | None:
        return await self._fingerprints.get(data_id)

    async def get_config(self, data_id: str) -> bytes:
        """Fetch the current value of ``data_id`` without touching the cache."""
        ensure_wire_safe(data_id, "data_id")
        params = config_params(data_id, self._cfg.group, self._cfg.namespace)
        return await self._t.request("GET", CONFIGS_PATH, params=params)

    async def wait_for_new_config(self, data_id: str) -> bytes:
        ensure_wire_safe(data_id, "data_id")
        if await self._fingerprints.get(data_id) is None:
            # Never seen: return the current value right away.
            content = await self.get_config(data_id)
            await self._fingerprints.set(data_id, fingerprint(content))
            return content

        long_poll_ms = self._cfg.long_poll_timeout_ms
        headers = {LONG_POLL_HEADER: str(long_poll_ms)}
        timeout = long_poll_ms / 1000 + self._cfg.timeout_s
        while True:
            current = await self._fingerprints.get(data_id)
            listening = build_listening_configs(data_id, self._cfg.group, current, self._cfg.namespace)
            content = await self._t.request(
                "POST",
                LISTENER_PATH,
                params={LISTENING_CONFIGS_PARAM: listening},
                headers=headers,
                timeout=timeout,
            )
            if not content:
                log.debug("No new config for %s", data_id)
                continue
            await self._fingerprints.set(data_id, fingerprint(content))
            return content
