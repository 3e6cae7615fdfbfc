from gopl import graph
from gopl.graph import Graph


def test_edges_are_directed():
    g = Graph()
    g.add_edge("a", "b")
    assert g.has_edge("a", "b")
    assert not g.has_edge("b", "a")
    assert not g.has_edge("x", "b")


def test_main(capsys):
    graph.main([])
    assert capsys.readouterr().out.split() == [
        "true", "true", "true", "true", "false", "true", "false", "false",
    ]