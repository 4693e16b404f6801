"""Scan session — the tick-driven progress/phase state machine."""

from __future__ import annotations

import enum
import logging
import math
import random
import threading
import time
from collections.abc import Callable

from reposcout.scanner.generator import AnalysisGenerator
from reposcout.scanner.models import RepoAnalysis, RepoIdentifier, RiskAssessment
from reposcout.scanner.risk import classify

logger = logging.getLogger(__name__)

SCAN_PHASES = (
    "Initializing security scan...",
    "Fetching repository metadata...",
    "Analyzing commit history...",
    "Scanning dependency tree...",
    "Checking for known vulnerabilities...",
    "Evaluating maintenance patterns...",
    "Assessing community trust signals...",
    "Compiling risk assessment...",
)

COMPLETE_PROGRESS = 100.0

# Per-tick progress increment, drawn uniformly from [MIN, MAX)
MIN_INCREMENT = 5.0
MAX_INCREMENT = 20.0

# Upper bound on ticks per scan, given the minimum increment
MAX_TICKS = math.ceil(COMPLETE_PROGRESS / MIN_INCREMENT)

DEFAULT_TICK_INTERVAL = 0.4


class ScanStatus(enum.Enum):
    """Lifecycle state of a scan session."""

    IDLE = "idle"
    SCANNING = "scanning"
    COMPLETE = "complete"


def phase_for(progress: float) -> str:
    """Return the phase caption shown at ``progress`` percent."""
    progress = max(0.0, min(progress, COMPLETE_PROGRESS))
    index = math.floor(progress / COMPLETE_PROGRESS * (len(SCAN_PHASES) - 1))
    return SCAN_PHASES[index]


class ScanSession:
    """Drives one simulated scan at a time.

    ``tick()`` advances the scan by one step. The session also keeps a
    repeating timer as a deadline: hosts with their own loop call ``poll()``
    and the session ticks whenever the deadline has passed, while ``run()``
    blocks and ticks until the scan completes or ``stop()`` is called.
    Starting a new scan disarms the previous timer first, so a session is
    never driven by two timers.
    """

    def __init__(
        self,
        generator: AnalysisGenerator,
        rng: random.Random | None = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        on_progress: Callable[[ScanSession], None] | None = None,
        on_complete: Callable[[RepoAnalysis, RiskAssessment], None] | None = None,
    ) -> None:
        self._generator = generator
        self._rng = rng or random.Random()
        self._tick_interval = tick_interval
        self._clock = clock
        self._on_progress = on_progress
        self._on_complete = on_complete
        self._stop_event = threading.Event()
        self._next_tick: float | None = None

        self._target: RepoIdentifier | None = None
        self._status = ScanStatus.IDLE
        self._progress = 0.0
        self._phase_text = ""
        self._ticks = 0
        self._analysis: RepoAnalysis | None = None
        self._assessment: RiskAssessment | None = None

    @property
    def target(self) -> RepoIdentifier | None:
        return self._target

    @property
    def status(self) -> ScanStatus:
        return self._status

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def phase_text(self) -> str:
        return self._phase_text

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def analysis(self) -> RepoAnalysis | None:
        return self._analysis

    @property
    def assessment(self) -> RiskAssessment | None:
        return self._assessment

    @property
    def timer_active(self) -> bool:
        return self._next_tick is not None

    def start(self, target: RepoIdentifier) -> None:
        """Begin scanning ``target``, discarding any previous scan."""
        if self._status is ScanStatus.SCANNING:
            logger.info(
                "Cancelling scan of %s at %.0f%%",
                self._target.full_name if self._target else "?",
                self._progress,
            )
            self.stop()

        self._stop_event = threading.Event()
        self._target = target
        self._status = ScanStatus.SCANNING
        self._progress = 0.0
        self._phase_text = phase_for(0.0)
        self._ticks = 0
        self._analysis = None
        self._assessment = None
        self._next_tick = self._clock() + self._tick_interval
        logger.info("Scanning %s", target.full_name)

    def tick(self) -> bool:
        """Advance the scan by one step. Returns False when not scanning."""
        if self._status is not ScanStatus.SCANNING:
            return False

        increment = MIN_INCREMENT + self._rng.random() * (
            MAX_INCREMENT - MIN_INCREMENT
        )
        self._progress = min(self._progress + increment, COMPLETE_PROGRESS)
        self._ticks += 1
        self._phase_text = phase_for(self._progress)
        logger.debug(
            "Tick %d: %.1f%% (%s)", self._ticks, self._progress, self._phase_text
        )

        if self._progress >= COMPLETE_PROGRESS:
            self._complete()

        if self._on_progress:
            self._on_progress(self)
        return True

    def poll(self) -> bool:
        """Tick if the timer deadline has passed. Returns whether it ticked."""
        if self._next_tick is None or self._clock() < self._next_tick:
            return False
        self._next_tick += self._tick_interval
        return self.tick()

    def run(self) -> ScanStatus:
        """Block, ticking on the timer, until the scan completes or stops."""
        while self._status is ScanStatus.SCANNING and self._next_tick is not None:
            remaining = max(0.0, self._next_tick - self._clock())
            if self._stop_event.wait(timeout=remaining):
                break
            self.poll()
        return self._status

    def stop(self) -> None:
        """Disarm the timer. An unfinished scan falls back to idle."""
        self._stop_event.set()
        self._next_tick = None
        if self._status is ScanStatus.SCANNING:
            self._status = ScanStatus.IDLE

    def _complete(self) -> None:
        if self._target is None:
            raise RuntimeError("Cannot complete a scan without a target")
        self._progress = COMPLETE_PROGRESS
        self._next_tick = None
        self._status = ScanStatus.COMPLETE

        analysis = self._generator.generate(self._target)
        assessment = classify(analysis.risk_score)
        self._analysis = analysis
        self._assessment = assessment
        logger.info(
            "Scan of %s complete after %d ticks: %d (%s)",
            self._target.full_name,
            self._ticks,
            analysis.risk_score,
            assessment.label,
        )

        if self._on_complete:
            self._on_complete(analysis, assessment)
