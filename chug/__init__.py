"""Changelog fragments from git history and GitHub issues."""

__version__ = "0.2.0"
