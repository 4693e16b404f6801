"""CLI command: reposcout tui — interactive scan console."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from reposcout.cli import load_state

console = Console(stderr=True)


@click.command()
@click.option(
    "--query",
    "-q",
    default="",
    help="Pre-fill the scan target.",
)
@click.pass_context
def tui(ctx: click.Context, query: str) -> None:
    """Open the interactive scan console."""
    if not sys.stdin.isatty():
        console.print("[red]The interactive console needs a terminal.[/red]")
        sys.exit(1)

    from reposcout.tui.app import ScoutApp

    state = load_state(ctx)
    state.on_query_change(query)
    ScoutApp(state).run()
