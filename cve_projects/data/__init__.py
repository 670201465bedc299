"""Bundled data assets for cve-projects."""

from pathlib import Path

DATA_DIR = Path(__file__).parent
TRACKED_PROJECTS_PATH = DATA_DIR / "tracked_projects.json"

__all__ = ["DATA_DIR", "TRACKED_PROJECTS_PATH"]
