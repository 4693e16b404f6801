"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import click

from reposcout import __version__
from reposcout.catalog.loader import CatalogError, load_catalog
from reposcout.config import ScoutConfig
from reposcout.scanner.session import ScanSession
from reposcout.state import ScoutState, build_session


@click.group()
@click.version_option(version=__version__, prog_name="reposcout")
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed the random source for reproducible scans.",
)
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML finding catalog.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(
    ctx: click.Context,
    seed: int | None,
    catalog: str | None,
    verbose: bool,
) -> None:
    """RepoScout — open source due diligence for GitHub repositories."""
    ctx.ensure_object(dict)
    ctx.obj["seed"] = seed
    ctx.obj["catalog_path"] = catalog

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_state(
    ctx: click.Context,
    tick_interval: float | None = None,
    on_progress: Callable[[ScanSession], None] | None = None,
) -> ScoutState:
    """Build the application state from env config and global options."""
    config = load_config(ctx)
    if tick_interval is not None:
        config.tick_interval = tick_interval
    try:
        catalog = load_catalog(config.catalog_path)
    except CatalogError as e:
        raise click.BadParameter(str(e), param_hint="--catalog") from e
    session = build_session(config, catalog=catalog, on_progress=on_progress)
    return ScoutState(session=session)


def load_config(ctx: click.Context) -> ScoutConfig:
    """Environment config, overridden by the global command line options."""
    config = ScoutConfig.load()
    if ctx.obj.get("seed") is not None:
        config.seed = ctx.obj["seed"]
    if ctx.obj.get("catalog_path"):
        config.catalog_path = Path(ctx.obj["catalog_path"])
    return config


def _register_commands() -> None:
    from reposcout.cli.scan import scan  # noqa: F811
    from reposcout.cli.server import server  # noqa: F811
    from reposcout.cli.tui import tui  # noqa: F811

    main.add_command(scan)
    main.add_command(tui)
    main.add_command(server)


_register_commands()
