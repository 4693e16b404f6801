"""JSON-ready report dicts for completed scans."""

from __future__ import annotations

from reposcout.scanner.models import Finding, RepoAnalysis, RiskAssessment


def build_report(analysis: RepoAnalysis, assessment: RiskAssessment) -> dict:
    """Flatten an analysis and its assessment into plain JSON types."""
    return {
        "owner": analysis.owner,
        "repo_name": analysis.repo_name,
        "full_name": analysis.full_name,
        "stars": analysis.stars,
        "forks": analysis.forks,
        "open_issues": analysis.open_issues,
        "license": analysis.license,
        "last_update": analysis.last_update,
        "age": analysis.age,
        "contributors": analysis.contributors,
        "risk_score": analysis.risk_score,
        "critical_count": analysis.critical_count,
        "findings": [_finding_dict(f) for f in analysis.findings],
        "risk": {
            "label": assessment.label,
            "tier": assessment.tier.value,
            "verdict_title": assessment.verdict_title,
            "verdict_body": assessment.verdict_body,
        },
    }


def _finding_dict(finding: Finding) -> dict:
    return {
        "category": finding.category,
        "severity": finding.severity.value,
        "title": finding.title,
        "description": finding.description,
    }
