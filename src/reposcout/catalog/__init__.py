"""Finding catalogs — the fixed universe of simulated findings."""
