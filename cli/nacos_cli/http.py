from __future__ import annotations

from nacos_client import NacosClient
from nacos_client.config_types import ClientConfig

from .config import AppConfig, apply_env, apply_profile, split_server_addr


def resolve_config(
    cfg: AppConfig,
    *,
    profile: str | None = None,
    server_addr: str | None = None,
    scheme: str | None = None,
    group: str | None = None,
    namespace: str | None = None,
) -> ClientConfig:
    """Layer profile, environment and command-line overrides over ``cfg``."""
    effective = apply_env(apply_profile(cfg, profile))
    effective_scheme = (scheme or effective.scheme).strip().lower()
    addr = effective.server_addr
    if server_addr:
        effective_scheme, addr = split_server_addr(server_addr, effective_scheme)
    return ClientConfig(
        server_addr=addr,
        scheme=effective_scheme,
        group=group or effective.group,
        namespace=namespace if namespace is not None else effective.namespace,
    )


def make_client(cfg: AppConfig, **overrides) -> NacosClient:
    return NacosClient(resolve_config(cfg, **overrides))
