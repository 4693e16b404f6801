"""Analysis generator — synthesizes repository metrics and findings."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from reposcout.scanner.models import Finding, RepoAnalysis, RepoIdentifier

logger = logging.getLogger(__name__)

LICENSES = ("MIT", "Apache-2.0", "GPL-3.0", "BSD-3-Clause", "Unlicense")

# Inclusive bounds for each synthesized metric
STARS_RANGE = (100, 10099)
FORKS_RANGE = (10, 1009)
OPEN_ISSUES_RANGE = (0, 199)
CONTRIBUTORS_RANGE = (1, 50)
RISK_SCORE_RANGE = (20, 79)
DAYS_SINCE_UPDATE_RANGE = (1, 30)
AGE_YEARS_RANGE = (1, 5)
FINDINGS_COUNT_RANGE = (3, 7)


class AnalysisGenerator:
    """Builds a RepoAnalysis from a finding catalog and a random source.

    Every value comes from ``rng``, so two generators seeded alike produce
    identical analyses for the same sequence of identifiers.
    """

    def __init__(
        self,
        catalog: Sequence[Finding],
        rng: random.Random | None = None,
    ) -> None:
        if len(catalog) < FINDINGS_COUNT_RANGE[1]:
            raise ValueError(
                f"Catalog needs at least {FINDINGS_COUNT_RANGE[1]} findings"
            )
        self._catalog = tuple(catalog)
        self._rng = rng or random.Random()

    @property
    def catalog(self) -> tuple[Finding, ...]:
        return self._catalog

    def generate(self, identifier: RepoIdentifier) -> RepoAnalysis:
        """Synthesize an analysis for ``identifier``."""
        rng = self._rng
        risk_score = rng.randint(*RISK_SCORE_RANGE)
        findings = self._pick_findings()

        analysis = RepoAnalysis(
            owner=identifier.owner,
            repo_name=identifier.repo,
            stars=rng.randint(*STARS_RANGE),
            forks=rng.randint(*FORKS_RANGE),
            open_issues=rng.randint(*OPEN_ISSUES_RANGE),
            license=rng.choice(LICENSES),
            last_update=f"{rng.randint(*DAYS_SINCE_UPDATE_RANGE)} days ago",
            age=f"{rng.randint(*AGE_YEARS_RANGE)} years",
            contributors=rng.randint(*CONTRIBUTORS_RANGE),
            risk_score=risk_score,
            findings=findings,
        )
        logger.debug(
            "Generated analysis for %s: score=%d findings=%d",
            identifier.full_name,
            risk_score,
            len(findings),
        )
        return analysis

    def _pick_findings(self) -> tuple[Finding, ...]:
        count = self._rng.randint(*FINDINGS_COUNT_RANGE)
        # Random.shuffle is Fisher-Yates: every ordering is equally likely
        shuffled = list(self._catalog)
        self._rng.shuffle(shuffled)
        return tuple(shuffled[:count])
