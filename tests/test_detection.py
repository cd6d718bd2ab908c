from labelgraph import EdgeAnalyzer, Edge


def test_sample_edges_are_undirected_once(sample_graph):
    edges = EdgeAnalyzer(sample_graph).find_edges()
    assert edges == [
        Edge("A", "B", False),
        Edge("A", "C", False),
        Edge("B", "D", False),
        Edge("C", "E", False),
        Edge("D", "E", False),
    ]


def test_directed_and_mirrored_edges(graph):
    graph.add_edge("B", "A", undirected=False)
    graph.add_edge("B", "C", undirected=False)
    graph.add_edge("C", "B", undirected=False)
    graph.add_edge("D", "D")

    analyzer = EdgeAnalyzer(graph)
    assert analyzer.find_edges() == [
        Edge("B", "A", True),
        Edge("B", "C", False),
        Edge("D", "D", False),
    ]
    assert analyzer.is_undirected_pair("C", "B")
    assert not analyzer.is_undirected_pair("A", "B")
    assert analyzer.count_edges() == (1, 2)


def test_empty_graph_has_no_edges(graph):
    assert EdgeAnalyzer(graph).find_edges() == []
    assert EdgeAnalyzer(graph).count_edges() == (0, 0)
