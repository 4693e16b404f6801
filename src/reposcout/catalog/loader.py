"""Load finding catalogs from YAML files and packaged presets."""

from __future__ import annotations

import functools
import importlib.resources
from pathlib import Path

import yaml

from reposcout.scanner.models import Finding, Severity

FindingCatalog = tuple[Finding, ...]

DEFAULT_PRESET = "default"

# Every catalog, built-in or user supplied, holds exactly this many findings
CATALOG_SIZE = 10

_REQUIRED_KEYS = ("category", "severity", "title", "description")


class CatalogError(ValueError):
    """A catalog file is malformed."""


def load_catalog(path: str | Path | None = None) -> FindingCatalog:
    """Load a catalog from a YAML file, or the packaged default preset."""
    if path is None:
        return default_catalog()
    text = Path(path).read_text(encoding="utf-8")
    return load_catalog_from_string(text)


def load_catalog_from_string(text: str) -> FindingCatalog:
    """Parse a YAML string into a catalog."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise CatalogError("Catalog YAML must be a mapping")
    return _build_catalog(data)


@functools.lru_cache(maxsize=None)
def default_catalog() -> FindingCatalog:
    """The built-in 10-entry catalog, parsed once per process."""
    return _load_preset(DEFAULT_PRESET)


def _load_preset(name: str) -> FindingCatalog:
    filename = f"{name}.yaml"
    pkg = importlib.resources.files("reposcout.catalog.presets")
    text = pkg.joinpath(filename).read_text(encoding="utf-8")
    return load_catalog_from_string(text)


def _build_catalog(data: dict) -> FindingCatalog:
    entries = data.get("findings")
    if not isinstance(entries, list):
        raise CatalogError("Catalog must define a 'findings' list")

    findings = tuple(_parse_finding(i, entry) for i, entry in enumerate(entries))

    titles = [f.title for f in findings]
    duplicates = sorted({t for t in titles if titles.count(t) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate finding titles: {', '.join(duplicates)}")

    if len(findings) != CATALOG_SIZE:
        raise CatalogError(
            f"Catalog needs exactly {CATALOG_SIZE} findings, "
            f"got {len(findings)}"
        )
    return findings


def _parse_finding(index: int, entry: object) -> Finding:
    if not isinstance(entry, dict):
        raise CatalogError(f"Finding #{index + 1} must be a mapping")

    missing = [k for k in _REQUIRED_KEYS if not entry.get(k)]
    if missing:
        raise CatalogError(
            f"Finding #{index + 1} is missing: {', '.join(missing)}"
        )

    try:
        severity = Severity(str(entry["severity"]).lower())
    except ValueError:
        raise CatalogError(
            f"Finding #{index + 1} has unknown severity '{entry['severity']}'"
        ) from None

    return Finding(
        category=str(entry["category"]),
        severity=severity,
        title=str(entry["title"]),
        description=str(entry["description"]),
    )
