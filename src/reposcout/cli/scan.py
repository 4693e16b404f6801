"""CLI command: reposcout scan <target> — run one simulated scan."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from reposcout.cli import load_state
from reposcout.scanner.models import RiskTier
from reposcout.scanner.parser import FormatError, parse_repo_identifier
from reposcout.scanner.report import build_report
from reposcout.scanner.session import ScanSession, ScanStatus
from reposcout.tui.display import render_results

console = Console(stderr=True)


@click.command()
@click.argument("target")
@click.option(
    "--interval",
    type=click.FloatRange(min=0.0),
    default=None,
    help="Seconds between scan steps (default: 0.4).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.pass_context
def scan(
    ctx: click.Context,
    target: str,
    interval: float | None,
    as_json: bool,
) -> None:
    """Run a simulated security scan of TARGET (owner/repo or GitHub URL)."""
    try:
        identifier = parse_repo_identifier(target)
    except FormatError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(2)

    progress = Progress(
        TextColumn("[cyan]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
        disable=as_json,
    )
    task_id = progress.add_task(description="", total=100)

    def on_progress(session: ScanSession) -> None:
        progress.update(
            task_id, completed=session.progress, description=session.phase_text
        )

    state = load_state(ctx, tick_interval=interval, on_progress=on_progress)
    state.on_query_change(target)

    if not as_json:
        console.print(
            f"[bold]RepoScout[/bold] scanning [cyan]{identifier.full_name}[/cyan]\n"
        )

    with progress:
        state.on_start_scan()
        try:
            status = state.run()
        except KeyboardInterrupt:
            state.session.stop()
            status = state.status

    analysis, assessment = state.analysis, state.assessment
    if status is not ScanStatus.COMPLETE or analysis is None or assessment is None:
        console.print("[dim]Scan interrupted.[/dim]")
        sys.exit(130)

    if as_json:
        click.echo(json.dumps(build_report(analysis, assessment), indent=2))
    else:
        console.print(render_results(analysis, assessment))

    if assessment.tier is RiskTier.CRITICAL:
        sys.exit(1)
