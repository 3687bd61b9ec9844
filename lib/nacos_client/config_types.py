from __future__ import annotations
from dataclasses import dataclass

import httpx

from .protocol import FIELD_SEP, RECORD_SEP, ensure_wire_safe

SCHEMES = ("http", "https")
_HOST_FORBIDDEN = set("/@?#[]")


def split_host_port(server_addr: str) -> tuple[str, int]:
    value = (server_addr or "").strip()
    if value.startswith("["):
        host, sep, rest = value[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ValueError(f"server_addr must be host:port, got {server_addr!r}")
        port_raw = rest[1:]
        if not host or any(c not in "0123456789abcdefABCDEF:." for c in host):
            raise ValueError(f"server_addr has no valid host: {server_addr!r}")
    else:
        host, sep, port_raw = value.rpartition(":")
        if not sep:
            raise ValueError(f"server_addr must be host:port, got {server_addr!r}")
        # Bare IPv6 literals are ambiguous with the port separator.
        if not host or ":" in host or any(c in _HOST_FORBIDDEN or c.isspace() for c in host):
            raise ValueError(f"server_addr has no valid host: {server_addr!r}")
    if not port_raw.isascii() or not port_raw.isdigit():
        raise ValueError(f"server_addr has no valid port: {server_addr!r}")
    port = int(port_raw)
    if not 0 < port < 65536:
        raise ValueError(f"server_addr port out of range: {server_addr!r}")
    return host, port


@dataclass(frozen=True)
class ClientConfig:
    server_addr: str
    scheme: str = "http"
    group: str = "DEFAULT_GROUP"
    namespace: str | None = None
    timeout_s: float = 15.0
    long_poll_timeout_ms: int = 30000

    def __post_init__(self) -> None:
        split_host_port(self.server_addr)
        if self.scheme not in SCHEMES:
            raise ValueError(f"scheme must be one of {', '.join(SCHEMES)}, got {self.scheme!r}")
        try:
            httpx.URL(self.base_url)
        except httpx.InvalidURL as e:
            raise ValueError(f"server_addr is not a valid address: {self.server_addr!r} ({e})") from e
        ensure_wire_safe(self.group, "group")
        # An empty namespace is still sent; only None omits the tenant field.
        if self.namespace is not None and (FIELD_SEP in self.namespace or RECORD_SEP in self.namespace):
            raise ValueError("namespace must not contain \\x01 or \\x02")
        if self.timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        if self.long_poll_timeout_ms <= 0:
            raise ValueError("long_poll_timeout_ms must be positive")

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.server_addr.strip()}"
