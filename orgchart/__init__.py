"""Org chart engine: resolve employee sheets into a hierarchy and lay it out."""

__version__ = "0.1.0"
