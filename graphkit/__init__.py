"""Undirected, directed and weighted graphs with traversal and path algorithms."""

__version__ = "0.1.0"
__all__ = ["common", "unweighted", "directed", "weighted", "cli"]