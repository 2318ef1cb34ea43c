import dataclasses

import pytest

from graphkit.common import BaseGraph, DijkstraResult, WeightedEdge


class _MappingGraph(BaseGraph):
    def __init__(self, adjacency):
        self._adjacency = {k: list(v) for k, v in adjacency.items()}

    def neighbors(self, node):
        return list(self._adjacency.get(node, ()))

    def nodes(self):
        seen = dict.fromkeys(self._adjacency)
        for targets in self._adjacency.values():
            seen.update(dict.fromkeys(targets))
        return list(seen)


@pytest.fixture
def tree():
    return _MappingGraph({"A": ["B", "C"], "B": ["D"], "E": ["F"]})


def test_base_graph_is_abstract():
    with pytest.raises(TypeError):
        BaseGraph()


def test_has_edge_follows_neighbors(tree):
    assert BaseGraph.has_edge(tree, "A", "B") is True
    assert BaseGraph.has_edge(tree, "B", "A") is False
    assert BaseGraph.has_edge(tree, "Z", "A") is False


def test_bfs_visits_reachable_nodes_once(tree):
    order = BaseGraph.bfs(tree, "A")
    assert order[0] == "A"
    assert sorted(order) == sorted(set(order))
    assert set(order) == {"A", "B", "C", "D"}
    assert order.index("C") < order.index("D")


def test_bfs_of_unknown_node_is_only_that_node(tree):
    assert BaseGraph.bfs(tree, "Q") == ["Q"]


def test_dfs_preorder(tree):
    assert BaseGraph.dfs(tree, "A") == ["A", "B", "D", "C"]


def test_dfs_and_bfs_cover_same_nodes(tree):
    for start in tree.nodes():
        assert set(BaseGraph.dfs(tree, start)) == set(BaseGraph.bfs(tree, start))


def test_dfs_handles_long_chains():
    size = 5000
    graph = _MappingGraph({str(i): [str(i + 1)] for i in range(size - 1)})
    order = BaseGraph.dfs(graph, "0")
    assert len(order) == size
    assert order == BaseGraph.bfs(graph, "0")


def test_is_connected_empty_graph():
    assert BaseGraph.is_connected(_MappingGraph({})) is True


def test_is_connected_depends_on_reachability(tree):
    assert BaseGraph.is_connected(tree) is False
    chain = _MappingGraph({"A": ["B"], "B": ["C"]})
    assert BaseGraph.is_connected(chain) is True


def test_connected_components_partition_nodes(tree):
    components = BaseGraph.connected_components(tree)
    flat = [node for component in components for node in component]
    assert sorted(flat) == sorted(tree.nodes())
    assert len(flat) == len(set(flat))
    assert components[0][0] == tree.nodes()[0]


def test_shortest_path_same_node(tree):
    assert BaseGraph.shortest_path(tree, "X", "X") == ["X"]


def test_shortest_path_follows_edges(tree):
    path = BaseGraph.shortest_path(tree, "A", "D")
    assert path[0] == "A" and path[-1] == "D"
    assert all(BaseGraph.has_edge(tree, u, v) for u, v in zip(path, path[1:]))
    assert len(path) == len(BaseGraph.bfs(tree, "A")) - 1


def test_shortest_path_prefers_fewest_edges():
    graph = _MappingGraph({"S": ["X", "T"], "X": ["T"]})
    assert BaseGraph.shortest_path(graph, "S", "T") == ["S", "T"]


def test_shortest_path_unreachable(tree):
    assert BaseGraph.shortest_path(tree, "A", "F") is None
    assert BaseGraph.shortest_path(tree, "D", "A") is None


def test_weighted_edge_is_immutable_value():
    edge = WeightedEdge("B", 4)
    assert edge == WeightedEdge(to="B", weight=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.weight = 5


def test_dijkstra_result_defaults_are_independent():
    first = DijkstraResult()
    second = DijkstraResult()
    first.path.append("A")
    assert second.path == []
    assert DijkstraResult(["A", "B"], 3).cost == 3