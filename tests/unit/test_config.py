"""Tests for environment-driven configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from reposcout.config import ScoutConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "REPOSCOUT_TICK_INTERVAL",
        "REPOSCOUT_SEED",
        "REPOSCOUT_CATALOG",
        "REPOSCOUT_WEB_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = ScoutConfig.load()
    assert config.tick_interval == 0.4
    assert config.seed is None
    assert config.catalog_path is None
    assert config.web_host == "127.0.0.1"
    assert config.web_port == 8471


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("REPOSCOUT_TICK_INTERVAL", "0.1")
    monkeypatch.setenv("REPOSCOUT_SEED", "42")
    monkeypatch.setenv("REPOSCOUT_CATALOG", "/tmp/catalog.yaml")
    monkeypatch.setenv("REPOSCOUT_WEB_PORT", "9000")

    config = ScoutConfig.load()
    assert config.tick_interval == 0.1
    assert config.seed == 42
    assert config.catalog_path == Path("/tmp/catalog.yaml")
    assert config.web_port == 9000


def test_seeded_rng_is_reproducible():
    config = ScoutConfig(seed=5)
    first = [config.make_rng().random() for _ in range(3)]
    second = [config.make_rng().random() for _ in range(3)]
    assert first == second


def test_config_fields():
    # Log verbosity is a command line concern handled by the CLI group
    assert [f.name for f in dataclasses.fields(ScoutConfig)] == [
        "tick_interval",
        "seed",
        "catalog_path",
        "web_host",
        "web_port",
    ]
