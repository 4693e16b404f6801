"""Application state shared by every presentation layer."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass

from reposcout.catalog.loader import FindingCatalog, load_catalog
from reposcout.config import ScoutConfig
from reposcout.scanner.generator import AnalysisGenerator
from reposcout.scanner.models import RepoAnalysis, RiskAssessment
from reposcout.scanner.parser import FormatError, parse_repo_identifier
from reposcout.scanner.session import ScanSession, ScanStatus

logger = logging.getLogger(__name__)

EXAMPLE_REPOS = ("facebook/react", "vercel/next.js", "lodash/lodash")


def build_session(
    config: ScoutConfig,
    rng: random.Random | None = None,
    catalog: FindingCatalog | None = None,
    on_progress: Callable[[ScanSession], None] | None = None,
) -> ScanSession:
    """Wire a ScanSession with the configured catalog and random source.

    A single random source drives both the tick increments and the
    generated analysis.
    """
    rng = rng or config.make_rng()
    if catalog is None:
        catalog = load_catalog(config.catalog_path)
    generator = AnalysisGenerator(catalog, rng=rng)
    return ScanSession(
        generator,
        rng=rng,
        tick_interval=config.tick_interval,
        on_progress=on_progress,
    )


@dataclass
class ScoutState:
    """Everything a presentation layer reads or changes.

    Presentation layers change it through the ``on_*`` transitions and
    read the fields. A rejected query leaves the previous analysis in
    place, a started scan clears it.
    """

    session: ScanSession
    query: str = ""
    error: str = ""
    analysis: RepoAnalysis | None = None
    assessment: RiskAssessment | None = None

    @classmethod
    def from_config(
        cls,
        config: ScoutConfig,
        rng: random.Random | None = None,
    ) -> ScoutState:
        return cls(session=build_session(config, rng))

    @property
    def status(self) -> ScanStatus:
        return self.session.status

    @property
    def is_scanning(self) -> bool:
        return self.session.status is ScanStatus.SCANNING

    @property
    def progress(self) -> float:
        return self.session.progress

    @property
    def phase_text(self) -> str:
        return self.session.phase_text

    def on_query_change(self, text: str) -> None:
        """Replace the pending query. No validation happens here."""
        self.query = text

    def use_example(self, example: int | str) -> None:
        """Fill the query with one of the example repositories."""
        if isinstance(example, int):
            example = EXAMPLE_REPOS[example % len(EXAMPLE_REPOS)]
        elif example not in EXAMPLE_REPOS:
            raise ValueError(f"Unknown example repository: {example}")
        self.on_query_change(example)

    def on_start_scan(self) -> bool:
        """Parse the query and start a scan. Returns False on bad input."""
        try:
            target = parse_repo_identifier(self.query)
        except FormatError as e:
            logger.info("Rejected scan target %r: %s", self.query, e)
            self.error = str(e)
            return False

        self.error = ""
        self.analysis = None
        self.assessment = None
        self.session.start(target)
        return True

    def on_tick(self) -> bool:
        """Advance the running scan by one step."""
        ticked = self.session.tick()
        self._collect_result()
        return ticked

    def poll(self) -> bool:
        """Advance the running scan if its timer is due."""
        ticked = self.session.poll()
        self._collect_result()
        return ticked

    def run(self) -> ScanStatus:
        """Block until the running scan completes or is stopped."""
        status = self.session.run()
        self._collect_result()
        return status

    def next_example(self) -> str:
        """Cycle the query through the example repositories."""
        try:
            index = EXAMPLE_REPOS.index(self.query) + 1
        except ValueError:
            index = 0
        self.use_example(index)
        return self.query

    def previous_example(self) -> str:
        """Cycle backwards; starts from the last example."""
        try:
            index = EXAMPLE_REPOS.index(self.query) - 1
        except ValueError:
            index = -1
        self.use_example(index)
        return self.query

    def _collect_result(self) -> None:
        if self.session.status is ScanStatus.COMPLETE and self.analysis is None:
            self.analysis = self.session.analysis
            self.assessment = self.session.assessment
