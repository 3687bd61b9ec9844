from __future__ import annotations

import typer

from nacos_client.config_types import ClientConfig

from .. import console
from ..config import config_path, load_config, save_config, split_server_addr

app = typer.Typer(help="Manage local settings (~/.config/nacos-watch/config.toml).")


@app.command("show")
def show_settings():
    cfg = load_config()
    namespace = cfg.namespace if cfg.namespace is not None else "(none)"
    console.console.print(
        f"server_addr={cfg.server_addr} scheme={cfg.scheme} group={cfg.group} namespace={namespace}",
        markup=False,
    )


@app.command("path")
def show_path():
    console.console.print(config_path(), markup=False)


@app.command("set")
def set_setting(
        server_addr: str | None = typer.Option(None, "--server-addr", help="Set server host:port."),
        scheme: str | None = typer.Option(None, "--scheme", help="Set http or https."),
        group: str | None = typer.Option(None, "--group", help="Set config group."),
        namespace: str | None = typer.Option(None, "--namespace", help="Set namespace id."),
        clear_namespace: bool = typer.Option(False, "--clear-namespace", help="Remove the namespace."),
):
    cfg = load_config()
    if scheme is not None:
        cfg.scheme = scheme.strip().lower()
    if server_addr is not None:
        cfg.scheme, cfg.server_addr = split_server_addr(server_addr, cfg.scheme)
    if group is not None:
        cfg.group = group.strip()
    if clear_namespace:
        cfg.namespace = None
    elif namespace is not None:
        cfg.namespace = namespace.strip()

    try:
        ClientConfig(server_addr=cfg.server_addr, scheme=cfg.scheme, group=cfg.group, namespace=cfg.namespace)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
