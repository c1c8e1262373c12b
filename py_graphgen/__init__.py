"""Planar graph generator: seeded points joined by a crossing-free edge set."""

__version__ = "0.1.0"
