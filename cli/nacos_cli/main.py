from __future__ import annotations

import typer

from .commands import config_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="nacos-watch",
        help="Read and long-poll Nacos config values.",
        no_args_is_help=True,
    )

    app.command("get")(config_cmd.get_config)
    app.command("watch")(config_cmd.watch_config)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
