"""Command that walks through the graph operations on small examples."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from graphkit.common import BaseGraph
from graphkit.directed import DirectedGraph
from graphkit.unweighted import UnweightedGraph


def _render(value: object) -> str:
    """Render values the way the demo output shows them."""
    if value is None:
        return "[]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + " ".join(_render(item) for item in value) + "]"
    return str(value)


def _show(label: str, value: object) -> None:
    print(label, _render(value))


def _common_walkthrough(g: BaseGraph) -> None:
    _show("Vizinhos de A:", g.neighbors("A"))
    _show("Vizinhos de E:", g.neighbors("E"))
    _show("BFS a partir de A:", g.bfs("A"))
    _show("DFS a partir de A:", g.dfs("A"))
    _show("É conectado?", g.is_connected())
    _show("Caminho mais curto entre A e D:", g.shortest_path("A", "D"))
    _show("Caminho mais curto entre A e F:", g.shortest_path("A", "F"))
    _show("Componentes conectados:", g.connected_components())


def demo_unweighted() -> None:
    """Print the walkthrough for an undirected graph."""
    g = UnweightedGraph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    g.add_edge("E", "F")

    print("Grafo não dirigido:")
    print(g)
    _show("HasEdge A-B:", g.has_edge("A", "B"))
    _show("HasEdge A-D:", g.has_edge("A", "D"))
    _common_walkthrough(g)
    _show("Tem ciclo?", g.has_cycle())

    g.remove_edge("A", "B")
    print("Após remover A-B:")
    print(g)
    _show("HasEdge A-B:", g.has_edge("A", "B"))


def demo_directed() -> None:
    """Print the walkthrough for a directed graph."""
    g = DirectedGraph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    g.add_edge("D", "A")
    g.add_edge("E", "F")

    print("Grafo dirigido:")
    print(g)
    _show("HasEdge A-B:", g.has_edge("A", "B"))
    _show("HasEdge B-A:", g.has_edge("B", "A"))
    _common_walkthrough(g)
    _show("Tem ciclo?", g.has_cycle())

    g.remove_edge("A", "B")
    print("Após remover A-B:")
    print(g)
    _show("HasEdge A-B:", g.has_edge("A", "B"))
    _show("Tem ciclo agora?", g.has_cycle())


def main(argv: Sequence[str] | None = None) -> int:
    """Run both walkthroughs."""
    parser = argparse.ArgumentParser(
        prog="graphkit", description="Demonstrate the graph operations."
    )
    parser.parse_args(argv)
    demo_unweighted()
    demo_directed()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())