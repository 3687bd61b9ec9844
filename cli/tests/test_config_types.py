from __future__ import annotations

import dataclasses

import pytest

from nacos_client.config_types import ClientConfig, split_host_port


def test_base_url_from_scheme_and_addr() -> None:
    assert ClientConfig(server_addr="10.0.0.5:8848").base_url == "http://10.0.0.5:8848"
    assert ClientConfig(server_addr="nacos.test:443", scheme="https").base_url == "https://nacos.test:443"


def test_config_is_immutable() -> None:
    cfg = ClientConfig(server_addr="nacos.test:8848")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.group = "OTHER"  # type: ignore[misc]


@pytest.mark.parametrize(
    "addr",
    [
        "nacos.test",
        ":8848",
        "nacos.test:http",
        "nacos.test:0",
        "nacos.test:70000",
        "",
        "::1:8848",
        "user@nacos.test:8848",
        "nacos test:8848",
        "nacos.test: 80",
        "nacos.test:+80",
        "nacos.test?x:8848",
        "[nacos.test]:8848",
    ],
)
def test_invalid_server_addr_is_rejected(addr) -> None:
    with pytest.raises(ValueError):
        ClientConfig(server_addr=addr)


def test_ipv6_server_addr() -> None:
    assert split_host_port("[::1]:8848") == ("::1", 8848)
    assert ClientConfig(server_addr="[::1]:8848").base_url == "http://[::1]:8848"


def test_empty_group_is_rejected() -> None:
    with pytest.raises(ValueError):
        ClientConfig(server_addr="nacos.test:8848", group="")


def test_unknown_scheme_is_rejected() -> None:
    with pytest.raises(ValueError):
        ClientConfig(server_addr="nacos.test:8848", scheme="ftp")


def test_namespace_with_separator_is_rejected() -> None:
    with pytest.raises(ValueError):
        ClientConfig(server_addr="nacos.test:8848", namespace="ns\x02")
