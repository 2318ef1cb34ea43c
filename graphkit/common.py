"""Shared graph types and the traversal algorithms common to every graph."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class WeightedEdge:
    """An edge towards ``to`` carrying an integer weight."""

    to: str
    weight: int


@dataclass
class DijkstraResult:
    """A path found by Dijkstra's algorithm together with its total cost."""

    path: list[str] = field(default_factory=list)
    cost: int = 0


class BaseGraph(ABC):
    """Behaviour shared by all graphs, built on ``neighbors`` and ``nodes``."""

    @abstractmethod
    def neighbors(self, node: str) -> list[str]:
        """Return the nodes adjacent to ``node``, in insertion order."""

    @abstractmethod
    def nodes(self) -> list[str]:
        """Return every node of the graph."""

    def has_edge(self, u: str, v: str) -> bool:
        """Return whether ``v`` is among the neighbours of ``u``."""
        return v in self.neighbors(u)

    def bfs(self, start: str) -> list[str]:
        """Return the nodes in breadth-first order from ``start``."""
        visited: set[str] = set()
        queue = deque([start])
        order: list[str] = []
        while queue:
            node = queue.popleft()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            queue.extend(n for n in self.neighbors(node) if n not in visited)
        return order

    def dfs(self, start: str) -> list[str]:
        """Return the nodes in depth-first preorder from ``start``."""
        return list(self._walk_depth_first(start, set()))

    def is_connected(self) -> bool:
        """Return whether every node is reachable from the first node."""
        nodes = self.nodes()
        if not nodes:
            return True
        visited: set[str] = set()
        for _ in self._walk_depth_first(nodes[0], visited):
            pass
        return all(node in visited for node in nodes)

    def connected_components(self) -> list[list[str]]:
        """Group the nodes by breadth-first reachability, in node order."""
        visited: set[str] = set()
        components: list[list[str]] = []
        for root in self.nodes():
            if root in visited:
                continue
            component: list[str] = []
            queue = deque([root])
            while queue:
                current = queue.popleft()
                if current in visited:
                    continue
                visited.add(current)
                component.append(current)
                queue.extend(n for n in self.neighbors(current) if n not in visited)
            components.append(component)
        return components

    def shortest_path(self, start: str, end: str) -> list[str] | None:
        """Return a path with the fewest edges from ``start`` to ``end``, or None."""
        if start == end:
            return [start]
        previous: dict[str, str] = {}
        visited = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbor in self.neighbors(node):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                previous[neighbor] = node
                if neighbor == end:
                    return _trace_back(previous, start, end)
                queue.append(neighbor)
        return None

    def _walk_depth_first(self, start: str, visited: set[str]) -> Iterator[str]:
        """Yield nodes in preorder, marking them in ``visited`` as they are reached."""
        if start in visited:
            return
        visited.add(start)
        yield start
        stack = [iter(self.neighbors(start))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    yield neighbor
                    stack.append(iter(self.neighbors(neighbor)))
                    break
            else:
                stack.pop()

    def _has_undirected_cycle(self) -> bool:
        """Detect a cycle treating every adjacency as an undirected edge."""
        visited: set[str] = set()
        for root in self.nodes():
            if root in visited:
                continue
            visited.add(root)
            stack: list[tuple[str, str | None, Iterator[str]]] = [
                (root, None, iter(self.neighbors(root)))
            ]
            while stack:
                node, parent, pending = stack[-1]
                for neighbor in pending:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append((neighbor, node, iter(self.neighbors(neighbor))))
                        break
                    if neighbor != parent:
                        return True
                else:
                    stack.pop()
        return False


def _trace_back(previous: Mapping[str, str], start: str, end: str) -> list[str]:
    path = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def _minimum_distance(
    distances: Mapping[str, float], visited: set[str], nodes: Iterable[str]
) -> str | None:
    """Return the unvisited node with the smallest distance (last one on ties)."""
    lowest = math.inf
    closest: str | None = None
    for node in nodes:
        if node not in visited and distances[node] <= lowest:
            lowest = distances[node]
            closest = node
    return closest