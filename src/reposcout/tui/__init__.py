"""Interactive terminal UI for RepoScout scans."""

from reposcout.tui.app import ScoutApp

__all__ = ["ScoutApp"]
