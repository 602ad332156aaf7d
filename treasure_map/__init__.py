"""Treasure Map: saved places, category filters and place search on one map screen."""

__version__ = "1.0.0"
