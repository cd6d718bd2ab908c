import pytest

from labelgraph import LabelGraph, GraphTraversal


def test_bfs_sample(sample_graph):
    assert sample_graph.bfs("A") == ["A", "B", "C", "D", "E"]


def test_dfs_sample(sample_graph):
    assert sample_graph.dfs("A") == ["A", "B", "D", "E", "C"]


@pytest.mark.parametrize("start", ["", "   ", None, "Q", " A"])
def test_blank_or_unknown_start_gives_empty(sample_graph, start):
    assert sample_graph.bfs(start) == []
    assert sample_graph.dfs(start) == []


def test_single_directed_edge():
    graph = LabelGraph()
    graph.add_edge("X", "Y", undirected=False)
    assert graph.bfs("Y") == ["Y"]
    assert graph.bfs("X") == ["X", "Y"]
    assert graph.dfs("Y") == ["Y"]
    assert graph.dfs("X") == ["X", "Y"]


def test_traversal_only_reaches_connected_component(graph):
    graph.add_edge("A", "B")
    graph.add_edge("C", "D")
    graph.add_vertex("E")
    assert graph.bfs("A") == ["A", "B"]
    assert graph.dfs("C") == ["C", "D"]
    assert graph.bfs("E") == ["E"]


def test_self_loop_does_not_repeat(graph):
    graph.add_edge("A", "A")
    graph.add_edge("A", "B")
    assert graph.bfs("A") == ["A", "B"]
    assert graph.dfs("A") == ["A", "B"]


def test_results_do_not_alias_graph(sample_graph):
    result = sample_graph.bfs("A")
    result.append("Z")
    assert sample_graph.bfs("A") == ["A", "B", "C", "D", "E"]
    assert "Z" not in sample_graph


def _wide_graph():
    graph = LabelGraph()
    edges = [
        ("root", "m"), ("root", "c"), ("root", "x"),
        ("c", "c2"), ("c", "c1"), ("m", "m1"), ("x", "c1"),
        ("c1", "deep"), ("m1", "deep"), ("deep", "root"),
    ]
    for a, b in edges:
        graph.add_edge(a, b, undirected=False)
    return graph


def test_bfs_visits_each_reachable_vertex_once_in_level_order():
    graph = _wide_graph()
    traversal = GraphTraversal(graph)
    order = traversal.bfs("root")
    levels = traversal.bfs_levels("root")

    assert order[0] == "root"
    assert len(order) == len(set(order))
    assert set(order) == set(levels)
    distances = [levels[v] for v in order]
    assert distances == sorted(distances)
    assert order == ["root", "c", "m", "x", "c1", "c2", "m1", "deep"]


def test_dfs_visits_each_reachable_vertex_once_in_preorder():
    graph = _wide_graph()
    order = graph.dfs("root")
    assert order[0] == "root"
    assert len(order) == len(set(order))
    assert order == ["root", "c", "c1", "deep", "c2", "m", "m1", "x"]


def test_dfs_matches_recursive_preorder(sample_graph):
    graph = _wide_graph()

    def recursive(g, start):
        visited, out = set(), []

        def visit(v):
            visited.add(v)
            out.append(v)
            for n in g.neighbors(v):
                if n not in visited:
                    visit(n)

        visit(start)
        return out

    for g in (graph, sample_graph):
        for start in g.vertices():
            assert g.dfs(start) == recursive(g, start)


def test_dfs_handles_long_chain_without_recursion_limit():
    graph = LabelGraph()
    labels = [f"v{i:05d}" for i in range(5000)]
    for a, b in zip(labels, labels[1:]):
        graph.add_edge(a, b)
    assert graph.dfs(labels[0]) == labels
    assert graph.bfs(labels[0]) == labels


def test_bfs_levels(sample_graph):
    levels = GraphTraversal(sample_graph).bfs_levels("A")
    assert levels == {"A": 0, "B": 1, "C": 1, "D": 2, "E": 2}
    assert GraphTraversal(sample_graph).bfs_levels("nope") == {}
