"""Undirected graph without edge weights."""

from __future__ import annotations

from contextlib import suppress

from graphkit.common import BaseGraph


class UnweightedGraph(BaseGraph):
    """An undirected multigraph stored as adjacency lists."""

    def __init__(self) -> None:
        self._adj: dict[str, list[str]] = {}

    def add_edge(self, u: str, v: str) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adj.setdefault(u, []).append(v)
        self._adj.setdefault(v, []).append(u)

    def remove_edge(self, u: str, v: str) -> None:
        """Remove one ``u``–``v`` edge if present; missing edges are ignored."""
        for a, b in ((u, v), (v, u)):
            if a in self._adj:
                with suppress(ValueError):
                    self._adj[a].remove(b)

    def neighbors(self, node: str) -> list[str]:
        """Return the nodes adjacent to ``node``; empty for unknown nodes."""
        return list(self._adj.get(node, ()))

    def nodes(self) -> list[str]:
        """Return every node that has ever had an edge."""
        return list(self._adj)

    def has_cycle(self) -> bool:
        """Return whether the graph contains a cycle."""
        return self._has_undirected_cycle()

    def __str__(self) -> str:
        return "".join(
            f"{node}: " + "".join(f"{n} " for n in targets) + "\n"
            for node, targets in self._adj.items()
        )