"""Global configuration — env vars and defaults."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path

from reposcout.scanner.session import DEFAULT_TICK_INTERVAL


@dataclass
class ScoutConfig:
    """Application-wide configuration."""

    tick_interval: float = DEFAULT_TICK_INTERVAL
    seed: int | None = None
    catalog_path: Path | None = None
    web_host: str = "127.0.0.1"  # Local only, never 0.0.0.0
    web_port: int = 8471

    @classmethod
    def load(cls) -> ScoutConfig:
        """Load config from environment variables over the defaults."""
        config = cls()

        env_interval = os.environ.get("REPOSCOUT_TICK_INTERVAL")
        if env_interval:
            config.tick_interval = float(env_interval)

        env_seed = os.environ.get("REPOSCOUT_SEED")
        if env_seed:
            config.seed = int(env_seed)

        env_catalog = os.environ.get("REPOSCOUT_CATALOG")
        if env_catalog:
            config.catalog_path = Path(env_catalog)

        env_port = os.environ.get("REPOSCOUT_WEB_PORT")
        if env_port:
            config.web_port = int(env_port)

        return config

    def make_rng(self) -> random.Random:
        """Random source for a scan; deterministic when a seed is set."""
        return random.Random(self.seed)
