"""Command line interface for cve-projects."""

from .main import main

__all__ = ["main"]
