"""Tests for the application state and its transitions."""

from __future__ import annotations

import random

import pytest

from reposcout.config import ScoutConfig
from reposcout.scanner.parser import EMPTY_INPUT_MESSAGE, INVALID_FORMAT_MESSAGE
from reposcout.scanner.session import ScanStatus
from reposcout.state import EXAMPLE_REPOS, ScoutState


def _complete(state: ScoutState) -> None:
    while state.on_tick():
        pass


def test_initial_state(state: ScoutState):
    assert state.query == ""
    assert state.error == ""
    assert state.status == ScanStatus.IDLE
    assert state.analysis is None
    assert not state.is_scanning


def test_query_change_does_not_validate(state: ScoutState):
    state.on_query_change("   garbage  ")
    assert state.query == "   garbage  "
    assert state.error == ""


def test_empty_query_sets_error(state: ScoutState):
    assert not state.on_start_scan()
    assert state.error == EMPTY_INPUT_MESSAGE
    assert state.status == ScanStatus.IDLE


def test_invalid_query_sets_error(state: ScoutState):
    state.on_query_change("not-a-valid-string")
    assert not state.on_start_scan()
    assert state.error == INVALID_FORMAT_MESSAGE
    assert state.status == ScanStatus.IDLE


def test_valid_query_starts_scan(state: ScoutState):
    state.on_query_change("https://github.com/vercel/next.js.git")
    assert state.on_start_scan()
    assert state.is_scanning
    assert state.session.target.full_name == "vercel/next.js"
    assert state.progress == 0


def test_success_clears_previous_error(state: ScoutState):
    state.on_start_scan()
    assert state.error

    state.on_query_change("facebook/react")
    state.on_start_scan()
    assert state.error == ""


def test_scan_completes_and_exposes_result(state: ScoutState):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    _complete(state)

    assert state.status == ScanStatus.COMPLETE
    assert state.progress == 100
    assert state.analysis is not None
    assert state.analysis.full_name == "facebook/react"
    assert state.assessment is not None
    assert state.analysis is state.session.analysis


def test_rejected_query_keeps_previous_analysis(state: ScoutState):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    _complete(state)
    analysis = state.analysis

    state.on_query_change("nope")
    assert not state.on_start_scan()
    assert state.analysis is analysis
    assert state.query == "nope"
    assert state.status == ScanStatus.COMPLETE


def test_new_scan_discards_previous_analysis(state: ScoutState):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    _complete(state)
    first = state.analysis

    state.on_query_change("lodash/lodash")
    state.on_start_scan()
    assert state.analysis is None
    assert state.assessment is None

    _complete(state)
    assert state.analysis is not first
    assert state.analysis.full_name == "lodash/lodash"


def test_rejected_query_does_not_interrupt_running_scan(state: ScoutState):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    state.on_tick()
    progress = state.progress

    state.on_query_change("")
    assert not state.on_start_scan()
    assert state.is_scanning
    assert state.progress == progress


def test_poll_ticks_on_deadline(state: ScoutState, clock):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    assert not state.poll()
    clock.advance(0.5)
    assert state.poll()
    assert state.progress > 0


def test_poll_collects_result(state: ScoutState, clock):
    state.on_query_change("facebook/react")
    state.on_start_scan()
    for _ in range(25):
        clock.advance(0.5)
        state.poll()
    assert state.status == ScanStatus.COMPLETE
    assert state.analysis is not None


class TestExamples:
    def test_use_example_by_index(self, state: ScoutState):
        state.use_example(1)
        assert state.query == "vercel/next.js"

    def test_use_example_by_name(self, state: ScoutState):
        state.use_example("lodash/lodash")
        assert state.query == "lodash/lodash"

    def test_unknown_example_rejected(self, state: ScoutState):
        with pytest.raises(ValueError):
            state.use_example("someone/else")

    def test_next_example_cycles(self, state: ScoutState):
        seen = [state.next_example() for _ in range(4)]
        assert seen == [*EXAMPLE_REPOS, EXAMPLE_REPOS[0]]

    def test_previous_example_cycles_backwards(self, state: ScoutState):
        seen = [state.previous_example() for _ in range(4)]
        assert seen == [*reversed(EXAMPLE_REPOS), EXAMPLE_REPOS[-1]]

    def test_previous_example_from_custom_query(self, state: ScoutState):
        state.on_query_change("someone/else")
        assert state.previous_example() == EXAMPLE_REPOS[-1]

    def test_examples_parse(self, state: ScoutState):
        for repo in EXAMPLE_REPOS:
            state.use_example(repo)
            assert state.on_start_scan()


def test_from_config_is_seeded():
    config = ScoutConfig(seed=99)
    a = ScoutState.from_config(config)
    b = ScoutState.from_config(config)
    for state in (a, b):
        state.on_query_change("facebook/react")
        state.on_start_scan()
        _complete(state)
    assert a.analysis == b.analysis


def test_from_config_with_explicit_rng():
    state = ScoutState.from_config(ScoutConfig(), rng=random.Random(3))
    state.on_query_change("facebook/react")
    assert state.on_start_scan()


def test_state_lives_outside_presentation_layers():
    import reposcout.state

    assert ScoutState.__module__ == "reposcout.state"
    imported_from = {
        getattr(obj, "__module__", None) or "" for obj in vars(reposcout.state).values()
    }
    assert not any(m.startswith("reposcout.tui") for m in imported_from)
