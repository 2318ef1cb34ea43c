"""Undirected graph whose edges carry non-negative integer weights."""

from __future__ import annotations

import math

from graphkit.common import BaseGraph, DijkstraResult, WeightedEdge, _minimum_distance


class WeightedGraph(BaseGraph):
    """An undirected weighted multigraph stored as adjacency lists."""

    def __init__(self) -> None:
        self._adj: dict[str, list[WeightedEdge]] = {}

    def add_edge(self, u: str, v: str, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``.

        Raises ValueError for a negative weight; the graph is left unchanged.
        """
        if weight < 0:
            raise ValueError(f"edge weight must not be negative, got {weight}")
        self._adj.setdefault(u, []).append(WeightedEdge(v, weight))
        self._adj.setdefault(v, []).append(WeightedEdge(u, weight))

    def remove_edge(self, u: str, v: str) -> None:
        """Remove one ``u``–``v`` edge if present; missing edges are ignored."""
        for a, b in ((u, v), (v, u)):
            edges = self._adj.get(a)
            if edges is None:
                continue
            found = next((i for i, edge in enumerate(edges) if edge.to == b), None)
            if found is not None:
                del edges[found]

    def neighbors(self, node: str) -> list[str]:
        """Return the nodes adjacent to ``node``; empty for unknown nodes."""
        return [edge.to for edge in self._adj.get(node, ())]

    def weighted_neighbors(self, node: str) -> list[WeightedEdge]:
        """Return the edges leaving ``node``; empty for unknown nodes."""
        return list(self._adj.get(node, ()))

    def nodes(self) -> list[str]:
        """Return every node appearing at either end of an edge."""
        seen: dict[str, None] = {}
        for node, edges in self._adj.items():
            seen[node] = None
            seen.update(dict.fromkeys(edge.to for edge in edges))
        return list(seen)

    def has_cycle(self) -> bool:
        """Return whether the graph contains a cycle."""
        return self._has_undirected_cycle()

    def dijkstra(self, start: str, end: str) -> DijkstraResult:
        """Find a cheapest path from ``start`` to ``end``.

        When ``end`` cannot be reached the result holds only ``start`` and a
        cost of zero. The cost adds, for each step, the weight of the first
        edge listed between the two nodes.
        """
        nodes = self.nodes()
        distances: dict[str, float] = dict.fromkeys(nodes, math.inf)
        distances[start] = 0
        visited: set[str] = set()
        parent: dict[str, str] = {}

        for _ in nodes:
            u = _minimum_distance(distances, visited, nodes)
            if u is None:
                break
            visited.add(u)
            if distances[u] == math.inf:
                continue
            for edge in self._adj.get(u, ()):
                candidate = distances[u] + edge.weight
                if edge.to not in visited and candidate < distances[edge.to]:
                    distances[edge.to] = candidate
                    parent[edge.to] = u

        path: list[str] = []
        cost = 0
        current = end
        while current in parent:
            path.append(current)
            previous = parent[current]
            cost += next(
                (edge.weight for edge in self._adj.get(previous, ()) if edge.to == current),
                0,
            )
            current = previous
        path.append(start)
        path.reverse()
        return DijkstraResult(path=path, cost=cost)

    def __str__(self) -> str:
        return "".join(
            f"{node}: " + "".join(f"{edge.to}({edge.weight}) " for edge in edges) + "\n"
            for node, edges in self._adj.items()
        )