"""Tests for the TUI display module."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from reposcout.scanner.models import Finding, RepoAnalysis, Severity
from reposcout.scanner.parser import INVALID_FORMAT_MESSAGE
from reposcout.scanner.risk import classify
from reposcout.state import ScoutState
from reposcout.tui.display import ScoutDisplay, render_results


def _render_to_string(state: ScoutState, height: int = 40, width: int = 120) -> str:
    """Render the TUI to a string for assertion."""
    display = ScoutDisplay()
    layout = display.render(state, height=height, width=width)
    buf = StringIO()
    console = Console(file=buf, width=width, height=height, force_terminal=True)
    console.print(layout)
    return buf.getvalue()


def _make_analysis(risk_score: int = 75) -> RepoAnalysis:
    return RepoAnalysis(
        owner="facebook",
        repo_name="react",
        stars=12345,
        forks=678,
        open_issues=42,
        license="MIT",
        last_update="3 days ago",
        age="4 years",
        contributors=17,
        risk_score=risk_score,
        findings=(
            Finding("Security", Severity.CRITICAL, "No Security Policy", "No SECURITY.md"),
            Finding("Trust", Severity.INFO, "New Repository", "Less than 1 year old"),
            Finding("Privacy", Severity.HIGH, "Telemetry Detected", "Analytics found"),
        ),
    )


def test_render_empty_state(state: ScoutState):
    output = _render_to_string(state)
    assert "Ready to Analyze" in output
    assert "facebook/react" in output
    assert "SYSTEM READY" in output


def test_render_query_and_error(state: ScoutState):
    state.on_query_change("bogus")
    state.on_start_scan()
    output = _render_to_string(state, width=140)
    assert "SCAN_TARGET" in output
    assert "bogus" in output
    assert INVALID_FORMAT_MESSAGE in output


def test_render_scanning(state: ScoutState):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    state.on_tick()
    output = _render_to_string(state)
    assert "SCANNING" in output
    assert f"{int(state.progress)}%" in output
    assert state.phase_text in output


def test_render_complete(state: ScoutState):
    state.on_query_change("lodash/lodash")
    state.on_start_scan()
    while state.on_tick():
        pass
    output = _render_to_string(state, height=60)
    assert "lodash" in output
    assert state.assessment.label in output
    assert f"Security Findings ({len(state.analysis.findings)})" in output


def test_render_results_content():
    analysis = _make_analysis()
    buf = StringIO()
    console = Console(file=buf, width=140, force_terminal=False)
    console.print(render_results(analysis, classify(analysis.risk_score)))
    output = buf.getvalue()

    assert "facebook/" in output
    assert "12,345" in output
    assert "678 forks" in output
    assert "Updated 3 days ago" in output
    assert "HIGH RISK" in output
    assert "Proceed with Extreme Caution" in output
    assert "CRITICAL" in output
    assert "INFO" in output
    assert "Critical Findings" in output
    assert "Security Findings (3)" in output


def test_render_results_low_risk():
    analysis = _make_analysis(risk_score=25)
    buf = StringIO()
    console = Console(file=buf, width=140, force_terminal=False)
    console.print(render_results(analysis, classify(analysis.risk_score)))
    output = buf.getvalue()
    assert "LOW RISK" in output
    assert "Relatively Safe to Use" in output
