"""Provably fair non-transitive dice game."""

__version__ = "1.0.0"
