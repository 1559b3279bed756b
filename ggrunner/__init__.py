"""Describe platforms, and find downloads, binaries and pinned versions of developer tools."""

__version__ = "0.1.0"