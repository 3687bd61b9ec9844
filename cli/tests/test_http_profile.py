from __future__ import annotations

import pytest

from nacos_cli import config
from nacos_cli.http import resolve_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch) -> None:
    for name in (config.ENV_SERVER_ADDR, config.ENV_NAMESPACE, config.ENV_GROUP):
        monkeypatch.delenv(name, raising=False)


def test_resolve_config_uses_profile(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(
        '\n'.join(
            [
                'server_addr = "default.test:8848"',
                'group = "DEFAULT_GROUP"',
                "",
                "[profiles.prod]",
                'server_addr = "https://prod.test:8443"',
                'namespace = "prod-ns"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    client_cfg = resolve_config(config.load_config(), profile="prod")

    assert client_cfg.base_url == "https://prod.test:8443"
    assert client_cfg.namespace == "prod-ns"
    assert client_cfg.group == "DEFAULT_GROUP"


def test_resolve_config_unknown_profile(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    (tmp_path / "config.toml").write_text('server_addr = "default.test:8848"\n', encoding="utf-8")

    with pytest.raises(ValueError):
        resolve_config(config.load_config(), profile="missing")


def test_command_line_overrides_win() -> None:
    cfg = config.AppConfig(server_addr="file.test:8848", namespace="file-ns")

    client_cfg = resolve_config(cfg, server_addr="cli.test:9000", group="CLI", namespace="cli-ns")

    assert client_cfg.server_addr == "cli.test:9000"
    assert client_cfg.group == "CLI"
    assert client_cfg.namespace == "cli-ns"


def test_invalid_server_addr_raises() -> None:
    with pytest.raises(ValueError):
        resolve_config(config.AppConfig(server_addr="no-port"))
