import pytest

from labelgraph import LabelGraph
from labelgraph.classes.utils import (
    normalize_label, normalize_pair, parse_edge_spec, format_adjacency,
)
from labelgraph.classes.graph_builders import GraphBuilders


def test_normalize_label():
    assert normalize_label(None) == ""
    assert normalize_label("  node 1\t") == "node 1"
    assert normalize_label("\n") == ""


def test_normalize_pair():
    assert normalize_pair("b", "a") == ("a", "b")
    assert normalize_pair("B", "a") == ("B", "a")


@pytest.mark.parametrize("spec,expected", [
    ("A-B", ("A", "B", True)),
    (" A - B ", ("A", "B", True)),
    ("A>B", ("A", "B", False)),
    ("A>B-C", ("A", "B-C", False)),
    ("-B", ("", "B", True)),
    ("AB", None),
    ("", None),
    (None, None),
])
def test_parse_edge_spec(spec, expected):
    assert parse_edge_spec(spec) == expected


def test_format_adjacency_sorts_keys_and_neighbors():
    assert format_adjacency({"b": {"z", "a"}, "a": []}) == "a: \nb: a, z\n"
    assert format_adjacency({}) == ""


def test_load_sample_replaces_content():
    graph = LabelGraph()
    graph.add_edge("Q", "R")
    GraphBuilders(graph).load_sample()
    assert list(graph.vertices()) == ["A", "B", "C", "D", "E"]
    assert graph.bfs("A") == ["A", "B", "C", "D", "E"]


def test_from_edge_specs():
    graph = LabelGraph()
    rejected = GraphBuilders(graph).from_edge_specs(
        ["A-B", "B>C", "oops", " - D"], vertices=["Z", " "],
    )
    assert rejected == ["oops"]
    assert dict(graph.adjacency()) == {"A": ("B",), "B": ("A", "C"), "C": (), "Z": ()}


def test_add_edge_specs_force_directed():
    graph = LabelGraph()
    GraphBuilders(graph).add_edge_specs(["A-B"], force_directed=True)
    assert graph.neighbors("B") == ()
