"""Local web API for RepoScout."""
