"""Scanner data models — identifiers, findings, analyses and risk tiers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Severity(enum.Enum):
    """Finding severity level, most severe first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class RiskTier(enum.Enum):
    """Colour tier of a risk assessment."""

    CRITICAL = "critical"
    WARNING = "warning"
    SAFE = "safe"


@dataclass(frozen=True)
class RepoIdentifier:
    """A normalized ``owner/repo`` pair."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class Finding:
    """A single simulated issue report."""

    category: str
    severity: Severity
    title: str
    description: str


@dataclass(frozen=True)
class RepoAnalysis:
    """Synthesized metrics and findings for one completed scan."""

    owner: str
    repo_name: str
    stars: int
    forks: int
    open_issues: int
    license: str
    last_update: str
    age: str
    contributors: int
    risk_score: int
    findings: tuple[Finding, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo_name}"

    @property
    def critical_count(self) -> int:
        """Findings rated critical or high."""
        return sum(
            1
            for f in self.findings
            if f.severity in (Severity.CRITICAL, Severity.HIGH)
        )


@dataclass(frozen=True)
class RiskAssessment:
    """Qualitative verdict derived from a risk score."""

    label: str
    tier: RiskTier
    verdict_title: str
    verdict_body: str
