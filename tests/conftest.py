import pytest

from labelgraph import LabelGraph


@pytest.fixture
def graph():
    return LabelGraph()


@pytest.fixture
def sample_graph():
    g = LabelGraph()
    for v in ["A", "B", "C", "D", "E"]:
        g.add_vertex(v)
    for a, b in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E")]:
        g.add_edge(a, b)
    return g
