"""Directed graph without edge weights."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import suppress

from graphkit.common import BaseGraph


class DirectedGraph(BaseGraph):
    """A directed multigraph stored as adjacency lists."""

    def __init__(self) -> None:
        self._adj: dict[str, list[str]] = {}

    def add_edge(self, u: str, v: str) -> None:
        """Add an edge from ``u`` to ``v``."""
        self._adj.setdefault(u, []).append(v)

    def remove_edge(self, u: str, v: str) -> None:
        """Remove one edge from ``u`` to ``v`` if present."""
        if u in self._adj:
            with suppress(ValueError):
                self._adj[u].remove(v)

    def neighbors(self, node: str) -> list[str]:
        """Return the successors of ``node``; empty for unknown nodes."""
        return list(self._adj.get(node, ()))

    def nodes(self) -> list[str]:
        """Return every node appearing as a source or a target."""
        seen: dict[str, None] = {}
        for node, targets in self._adj.items():
            seen[node] = None
            seen.update(dict.fromkeys(targets))
        return list(seen)

    def has_cycle(self) -> bool:
        """Return whether some directed cycle exists."""
        done: set[str] = set()
        on_path: set[str] = set()
        for root in self.nodes():
            if root in done:
                continue
            done.add(root)
            on_path.add(root)
            stack: list[tuple[str, Iterator[str]]] = [(root, iter(self.neighbors(root)))]
            while stack:
                node, pending = stack[-1]
                for neighbor in pending:
                    if neighbor in on_path:
                        return True
                    if neighbor not in done:
                        done.add(neighbor)
                        on_path.add(neighbor)
                        stack.append((neighbor, iter(self.neighbors(neighbor))))
                        break
                else:
                    on_path.discard(node)
                    stack.pop()
        return False

    def topological_sort(self) -> list[str]:
        """Return the nodes so that every edge points forward.

        Raises ValueError if the graph has a cycle.
        """
        if self.has_cycle():
            raise ValueError("graph has a cycle; no topological order exists")
        visited: set[str] = set()
        finished: list[str] = []
        for root in self.nodes():
            if root in visited:
                continue
            visited.add(root)
            stack: list[tuple[str, Iterator[str]]] = [(root, iter(self.neighbors(root)))]
            while stack:
                node, pending = stack[-1]
                for neighbor in pending:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append((neighbor, iter(self.neighbors(neighbor))))
                        break
                else:
                    finished.append(node)
                    stack.pop()
        finished.reverse()
        return finished

    def __str__(self) -> str:
        return "".join(
            f"{node}: " + "".join(f"{n} " for n in targets) + "\n"
            for node, targets in self._adj.items()
        )