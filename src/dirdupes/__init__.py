"""Heuristic duplicate-directory finder."""

__version__ = "0.1.0"
