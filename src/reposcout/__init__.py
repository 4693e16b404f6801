"""RepoScout — simulated open-source due diligence for GitHub repositories."""

__version__ = "0.1.0"
