from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def info(msg: str) -> None:
    console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {msg}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")


def print_payload(content: bytes) -> None:
    """Print config content as text, without markup or highlighting."""
    console.print(content.decode("utf-8", errors="replace"), markup=False, highlight=False, soft_wrap=True)
