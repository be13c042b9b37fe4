import math

import pytest

from craphs.graph import Graph, GraphFormatError, VertexError

GEXF = """<?xml version="1.0" encoding="UTF-8"?>
<gexf xmlns="urn:example:gexf" version="1.2">
  <graph mode="static" defaultedgetype="{edgetype}">
    <nodes count="4">
      <node id="0.0" label="A"/>
      <node id="1.0" label="B"/>
      <node id="2.0" label="C"/>
      <node id="3.0" label="D"/>
    </nodes>
    <edges>
      <edge id="0" source="0.0" target="1.0"/>
      <edge id="1" source="1.0" target="2.0"/>
      <edge id="2" source="2.0" target="1.0"/>
      <edge id="3" source="0.0" target="3.0"/>
    </edges>
  </graph>
</gexf>
"""


def write(tmp_path, text):
    path = tmp_path / "graph.gexf"
    path.write_text(text, encoding="utf-8")
    return path


def test_new_graph_is_empty():
    g = Graph(5)
    assert g.vertex_count == 5
    assert g.edge_count == 0
    assert all(g.degree(v) == 0 for v in range(5))
    assert g.max_degree() == 0


def test_add_edge_is_symmetric():
    g = Graph(3)
    g.add_edge(0, 2)
    assert g.is_connected(0, 2)
    assert g.is_connected(2, 0)
    assert not g.is_connected(0, 1)
    assert g.adj(0) == (2,)
    assert g.adj(2) == (0,)


def test_duplicate_edges_are_ignored():
    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 0)
    g.add_edge(0, 1)
    assert g.edge_count == 1
    assert g.degree(0) == 1
    assert g.degree(1) == 1


def test_adjacency_is_most_recent_first():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    assert g.adj(0) == (3, 2, 1)


def test_degree_sum_is_twice_edges():
    g = Graph(6)
    for v, w in [(0, 1), (1, 2), (2, 3), (3, 0), (4, 5), (0, 2)]:
        g.add_edge(v, w)
    assert sum(g.degree(v) for v in range(6)) == 2 * g.edge_count
    assert g.max_degree() == max(g.degree(v) for v in range(6))
    assert g.average_degree() == pytest.approx(2 * g.edge_count / g.vertex_count)


def test_average_degree_without_vertices_is_nan():
    value = Graph(0).average_degree()
    assert repr(value) == "nan"
    assert math.isnan(value) is True


@pytest.mark.parametrize("bad", [-1, 3, 100])
def test_check_vertex_rejects_out_of_range(bad):
    g = Graph(3)
    with pytest.raises(VertexError, match=f"Vertex {bad} out of range"):
        g.check_vertex(bad)
    with pytest.raises(VertexError):
        g.adj(bad)
    with pytest.raises(VertexError):
        g.add_edge(0, bad)


def test_vertex_error_is_index_error():
    with pytest.raises(IndexError):
        Graph(1).degree(1)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-2)


def test_str_lists_summary_and_edges():
    g = Graph(2)
    g.add_edge(0, 1)
    assert str(g) == "Graph(V=2, E=1)\nMax degree: 1\nAverage degree: 1\n0-1\n1-0\n"


def test_from_gexf_reads_nodes_and_edges(tmp_path):
    g = Graph.from_gexf(write(tmp_path, GEXF.format(edgetype="undirected")))
    assert g.vertex_count == 4
    assert g.edge_count == 3
    assert g.is_connected(0, 1)
    assert g.is_connected(1, 2)
    assert g.is_connected(3, 0)
    assert not g.is_connected(2, 3)


def test_from_gexf_accepts_string_path(tmp_path):
    path = write(tmp_path, GEXF.format(edgetype="undirected"))
    assert Graph.from_gexf(str(path)).edge_count == 3


def test_from_gexf_rejects_directed(tmp_path):
    path = write(tmp_path, GEXF.format(edgetype="directed"))
    with pytest.raises(GraphFormatError, match="Only undirected graphs are supported"):
        Graph.from_gexf(path)


def test_from_gexf_missing_file(tmp_path):
    with pytest.raises(GraphFormatError, match="failed to load XML file"):
        Graph.from_gexf(tmp_path / "absent.gexf")


def test_from_gexf_malformed_xml(tmp_path):
    path = write(tmp_path, "<gexf><graph>")
    with pytest.raises(GraphFormatError, match="failed to load XML file"):
        Graph.from_gexf(path)


def test_from_gexf_edge_out_of_range(tmp_path):
    text = GEXF.format(edgetype="undirected").replace('target="3.0"', 'target="9"')
    with pytest.raises(VertexError):
        Graph.from_gexf(write(tmp_path, text))


def test_from_gexf_missing_graph_element(tmp_path):
    with pytest.raises(GraphFormatError):
        Graph.from_gexf(write(tmp_path, "<gexf></gexf>"))