"""Structural analysis of undirected social network graphs loaded from edge lists."""

__version__ = "0.1.0"