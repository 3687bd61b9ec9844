from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

APP_NAME = "nacos-watch"
CONFIG_FILENAME = "config.toml"
DEFAULT_SERVER_ADDR = "127.0.0.1:8848"
DEFAULT_GROUP = "DEFAULT_GROUP"

ENV_SERVER_ADDR = "NACOS_SERVER_ADDR"
ENV_NAMESPACE = "NACOS_NAMESPACE"
ENV_GROUP = "NACOS_GROUP"


@dataclass
class AppConfig:
    server_addr: str
    scheme: str = "http"
    group: str = DEFAULT_GROUP
    namespace: str | None = None


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(server_addr=DEFAULT_SERVER_ADDR)


def split_server_addr(raw: str | None, default_scheme: str = "http") -> tuple[str, str]:
    """Accept ``host:port`` or ``http(s)://host:port/`` and return (scheme, host:port)."""
    value = (raw or "").strip().rstrip("/")
    scheme = default_scheme
    lowered = value.lower()
    for candidate in ("http", "https"):
        prefix = f"{candidate}://"
        if lowered.startswith(prefix):
            scheme = candidate
            value = value[len(prefix):]
            break
    # Drop any path such as a trailing /nacos.
    value = value.split("/", 1)[0]
    return scheme, value


def _apply_values(cfg: AppConfig, data: dict[str, Any]) -> AppConfig:
    scheme = str(data.get("scheme") or cfg.scheme).strip().lower()
    server_addr = cfg.server_addr
    raw_addr = str(data.get("server_addr") or "").strip()
    if raw_addr:
        scheme, server_addr = split_server_addr(raw_addr, scheme)
    group = str(data.get("group") or cfg.group).strip()
    namespace = cfg.namespace
    if "namespace" in data:
        ns = data.get("namespace")
        namespace = str(ns) if isinstance(ns, str) else None
    return AppConfig(server_addr=server_addr, scheme=scheme, group=group, namespace=namespace)


def from_toml(data: dict[str, Any]) -> AppConfig:
    return _apply_values(default_config(), data)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    out: dict[str, Any] = {
        "server_addr": cfg.server_addr,
        "scheme": cfg.scheme,
        "group": cfg.group,
    }
    if cfg.namespace is not None:
        out["namespace"] = cfg.namespace
    return out


def _read_toml() -> dict[str, Any] | None:
    try:
        with open(config_path(), "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None


def load_config() -> AppConfig:
    data = _read_toml()
    if data is None:
        return default_config()
    return from_toml(data)


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    data = _read_toml() or {}
    profiles_raw = data.get("profiles") or {}
    if not isinstance(profiles_raw, dict):
        return cfg
    prof = profiles_raw.get(profile)
    if not isinstance(prof, dict):
        raise ValueError(f"Unknown profile: {profile}")
    return _apply_values(cfg, prof)


def apply_env(cfg: AppConfig) -> AppConfig:
    values: dict[str, Any] = {}
    server_addr = os.getenv(ENV_SERVER_ADDR, "").strip()
    if server_addr:
        values["server_addr"] = server_addr
    group = os.getenv(ENV_GROUP, "").strip()
    if group:
        values["group"] = group
    namespace = os.getenv(ENV_NAMESPACE)
    if namespace is not None:
        values["namespace"] = namespace.strip()
    if not values:
        return cfg
    return _apply_values(cfg, values)


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
