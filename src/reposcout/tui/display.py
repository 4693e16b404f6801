"""TUI display — builds Rich renderables from ScoutState."""

from __future__ import annotations

from rich.console import Group
from rich.layout import Layout
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from reposcout.scanner.models import RepoAnalysis, RiskAssessment, RiskTier, Severity
from reposcout.state import EXAMPLE_REPOS, ScoutState

SEVERITY_COLORS = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "yellow",
    Severity.MEDIUM: "cyan",
    Severity.LOW: "green",
    Severity.INFO: "dim",
}

TIER_COLORS = {
    RiskTier.CRITICAL: "red",
    RiskTier.WARNING: "yellow",
    RiskTier.SAFE: "green",
}

_TIER_ICONS = {
    RiskTier.CRITICAL: "✖",
    RiskTier.WARNING: "!",
    RiskTier.SAFE: "✔",
}

_PLACEHOLDER = "owner/repo or https://github.com/owner/repo"


class ScoutDisplay:
    """Builds Rich Layout objects from the current ScoutState."""

    def render(self, state: ScoutState, height: int = 24, width: int = 80) -> Layout:
        """Build the full screen layout from current state."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="input", size=4),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        layout["header"].update(self._render_header(state))
        layout["input"].update(self._render_input(state))

        if state.is_scanning:
            layout["body"].update(self._render_scanning(state, width))
        elif state.analysis is not None and state.assessment is not None:
            layout["body"].update(
                render_results(state.analysis, state.assessment)
            )
        else:
            layout["body"].update(self._render_empty())

        layout["footer"].update(self._render_footer(state))
        return layout

    def _render_header(self, state: ScoutState) -> Panel:
        status = (
            "[yellow]SCANNING[/yellow]"
            if state.is_scanning
            else "[green]SYSTEM READY[/green]"
        )
        text = Text.from_markup(
            f"[bold]REPO SCOUT[/bold]  [dim]Open Source Due Diligence[/dim]"
            f"   {status}"
        )
        return Panel(text, style="bold")

    def _render_input(self, state: ScoutState) -> Panel:
        line = Text("> SCAN_TARGET: ", style="bold cyan")
        if state.query:
            line.append(state.query)
        else:
            line.append(_PLACEHOLDER, style="dim italic")
        if not state.is_scanning:
            line.append("▏", style="blink")

        lines = [line]
        if state.error:
            lines.append(Text(state.error, style="bold red"))
        return Panel(Group(*lines), border_style="cyan")

    def _render_scanning(self, state: ScoutState, width: int) -> Panel:
        percent = Text(f"{int(state.progress)}%", style="bold cyan")
        bar = ProgressBar(
            total=100,
            completed=state.progress,
            width=max(10, width - 8),
            complete_style="cyan",
        )
        phase = Text(state.phase_text, style="italic")
        target = state.session.target
        title = f"Scanning {target.full_name}" if target else "Scanning"
        return Panel(Group(percent, bar, phase), title=title, border_style="yellow")

    def _render_empty(self) -> Panel:
        examples = "  ".join(f"[cyan]{repo}[/cyan]" for repo in EXAMPLE_REPOS)
        text = Text.from_markup(
            "[bold]Ready to Analyze[/bold]\n"
            "\n"
            "Enter a GitHub repository URL to begin security assessment\n"
            "\n"
            f"[dim]Try:[/dim] {examples}"
        )
        return Panel(text, border_style="blue")

    def _render_footer(self, state: ScoutState) -> Panel:
        if state.is_scanning:
            keys = "[dim]Esc[/dim]:Quit"
        else:
            keys = (
                "[dim]Enter[/dim]:Scan  [dim]Tab/↑↓[/dim]:Example  "
                "[dim]Ctrl+U[/dim]:Clear  [dim]Esc[/dim]:Quit"
            )
        return Panel(Text.from_markup(keys), style="dim")


def render_results(analysis: RepoAnalysis, assessment: RiskAssessment) -> Group:
    """Render a completed analysis: header, stats, findings and verdict."""
    color = TIER_COLORS[assessment.tier]

    title = Text()
    title.append(f"{analysis.owner}/", style="dim")
    title.append(analysis.repo_name, style="bold")
    meta = Text(
        f"★ {analysis.stars:,}   ⑂ {analysis.forks:,} forks   "
        f"{analysis.license}   Updated {analysis.last_update}",
        style="dim",
    )
    score = Text()
    score.append(f"{analysis.risk_score}", style=f"bold {color}")
    score.append(f"  {assessment.label}", style=color)

    stats = Table.grid(expand=True, padding=(0, 2))
    for _ in range(4):
        stats.add_column(justify="center")
    stats.add_row(
        f"[bold]{analysis.contributors}[/bold]",
        f"[bold]{analysis.open_issues}[/bold]",
        f"[bold]{analysis.age}[/bold]",
        f"[bold]{analysis.critical_count}[/bold]",
    )
    stats.add_row(
        "[dim]Contributors[/dim]",
        "[dim]Open Issues[/dim]",
        "[dim]Repository Age[/dim]",
        "[dim]Critical Findings[/dim]",
    )

    verdict = Panel(
        Text.from_markup(
            f"[bold]{_TIER_ICONS[assessment.tier]} {assessment.verdict_title}"
            f"[/bold]\n{assessment.verdict_body}"
        ),
        border_style=color,
    )

    return Group(
        title,
        meta,
        score,
        Text(""),
        stats,
        Text(""),
        findings_table(analysis),
        verdict,
    )


def findings_table(analysis: RepoAnalysis) -> Table:
    """The findings of ``analysis`` in generation order."""
    table = Table(
        title=f"Security Findings ({len(analysis.findings)})",
        show_header=True,
        header_style="bold",
        expand=True,
    )
    table.add_column("Severity", width=10)
    table.add_column("Category", width=12)
    table.add_column("Finding", ratio=1)
    table.add_column("Details", ratio=2)

    for finding in analysis.findings:
        sev_color = SEVERITY_COLORS[finding.severity]
        table.add_row(
            f"[{sev_color}]{finding.severity.value.upper()}[/{sev_color}]",
            finding.category,
            finding.title,
            finding.description,
        )
    return table
