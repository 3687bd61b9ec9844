from __future__ import annotations

import asyncio

import typer

from nacos_client import NacosClient, NacosClientError

from .. import console
from ..config import load_config
from ..http import make_client

ServerAddrOption = typer.Option(None, "--server-addr", help="Server host:port (or http(s)://host:port).")
SchemeOption = typer.Option(None, "--scheme", help="http or https.")
GroupOption = typer.Option(None, "--group", help="Config group.")
NamespaceOption = typer.Option(None, "--namespace", help="Namespace (tenant) id.")
ProfileOption = typer.Option(None, "--profile", help="Profile from the settings file.")


def _client(profile, server_addr, scheme, group, namespace) -> NacosClient:
    try:
        return make_client(
            load_config(),
            profile=profile,
            server_addr=server_addr,
            scheme=scheme,
            group=group,
            namespace=namespace,
        )
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


def _run(coro) -> None:
    try:
        asyncio.run(coro)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except NacosClientError as e:
        console.err(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        raise typer.Exit(code=130)


async def _get(client: NacosClient, data_id: str) -> None:
    async with client:
        content = await client.get_config(data_id)
    console.print_payload(content)


async def _watch(client: NacosClient, data_id: str, changes: int) -> None:
    async with client:
        content = await client.wait_for_new_config(data_id)
        console.print_payload(content)
        seen = 0
        while not changes or seen < changes:
            content = await client.wait_for_new_config(data_id)
            seen += 1
            console.info(f"{data_id} changed ({len(content)} bytes)")
            console.print_payload(content)


def get_config(
        data_id: str = typer.Argument(..., help="Data id of the config entry."),
        server_addr: str | None = ServerAddrOption,
        scheme: str | None = SchemeOption,
        group: str | None = GroupOption,
        namespace: str | None = NamespaceOption,
        profile: str | None = ProfileOption,
):
    """Print the current value of DATA_ID."""
    client = _client(profile, server_addr, scheme, group, namespace)
    _run(_get(client, data_id))


def watch_config(
        data_id: str = typer.Argument(..., help="Data id of the config entry."),
        changes: int = typer.Option(0, "--changes", min=0, help="Stop after this many changes (0 = never)."),
        server_addr: str | None = ServerAddrOption,
        scheme: str | None = SchemeOption,
        group: str | None = GroupOption,
        namespace: str | None = NamespaceOption,
        profile: str | None = ProfileOption,
):
    """Print DATA_ID, then print every new value the server reports."""
    client = _client(profile, server_addr, scheme, group, namespace)
    _run(_watch(client, data_id, changes))
