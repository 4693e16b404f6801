"""Shared test fixtures."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from reposcout.catalog.loader import FindingCatalog, default_catalog
from reposcout.scanner.generator import AnalysisGenerator
from reposcout.scanner.session import ScanSession
from reposcout.state import ScoutState


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def catalog() -> FindingCatalog:
    return default_catalog()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def generator(catalog: FindingCatalog, rng: random.Random) -> AnalysisGenerator:
    return AnalysisGenerator(catalog, rng=rng)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(
    generator: AnalysisGenerator,
    rng: random.Random,
    clock: FakeClock,
) -> ScanSession:
    return ScanSession(generator, rng=rng, tick_interval=0.4, clock=clock)


@pytest.fixture
def state(session: ScanSession) -> ScoutState:
    return ScoutState(session=session)
