import json

import pytest

import graphio
from graphmodel import Edge, Graph, GraphError
from kruskal import build_kruskal
from prim import build_prim

INPUT = {
    'graphs': [
        {
            'id': 1,
            'nodes': ['A', 'B', 'C', 'D'],
            'edges': [
                {'from': 'A', 'to': 'B', 'weight': 4},
                {'from': 'A', 'to': 'C', 'weight': 2},
                {'from': 'B', 'to': 'C', 'weight': 1},
                {'from': 'C', 'to': 'D', 'weight': 5},
            ],
        },
        {
            'id': 2,
            'nodes': ['X', 'Y'],
            'edges': [{'from': 'X', 'to': 'Y', 'weight': 9}],
        },
    ]
}


def write(path, text):
    path.write_text(text)
    return str(path)


def test_read_text_graph(tmp_path):
    fname = write(tmp_path / 'graph.txt', '3 2\n0 1 5\n1 2 6\n')
    graph = graphio.read_text_graph(fname)

    assert graph.vertices == (0, 1, 2)
    assert graph.edges == (Edge(0, 1, 5), Edge(1, 2, 6))
    assert graph.graph_id == 1


def test_read_text_graph_skips_blank_lines(tmp_path):
    fname = write(tmp_path / 'graph.txt', '2 1\n\n0 1 5\n\n')
    assert graphio.read_text_graph(fname).num_edges() == 1


def test_read_text_graph_edge_count_mismatch(tmp_path):
    fname = write(tmp_path / 'graph.txt', '3 3\n0 1 5\n1 2 6\n')
    with pytest.raises(GraphError, match='announces 3 edges'):
        graphio.read_text_graph(fname)


def test_read_text_graph_bad_header(tmp_path):
    fname = write(tmp_path / 'graph.txt', 'three\n')
    with pytest.raises(GraphError, match='header'):
        graphio.read_text_graph(fname)


def test_read_text_graph_vertex_out_of_range(tmp_path):
    fname = write(tmp_path / 'graph.txt', '2 1\n0 5 1\n')
    with pytest.raises(GraphError, match='unknown vertex'):
        graphio.read_text_graph(fname)


def test_read_json_graphs(tmp_path):
    fname = write(tmp_path / 'input.json', json.dumps(INPUT))
    graphs = graphio.read_json_graphs(fname)

    assert [g.graph_id for g in graphs] == [1, 2]
    assert graphs[0].vertices == ('A', 'B', 'C', 'D')
    assert graphs[0].edges[0] == Edge('A', 'B', 4)


def test_read_json_graphs_invalid(tmp_path):
    with pytest.raises(GraphError, match='invalid JSON'):
        graphio.read_json_graphs(write(tmp_path / 'bad.json', '{"graphs": ['))
    with pytest.raises(GraphError, match='"graphs"'):
        graphio.read_json_graphs(write(tmp_path / 'empty.json', '{}'))


def test_load_graphs_dispatches_on_suffix(tmp_path):
    json_name = write(tmp_path / 'input.json', json.dumps(INPUT))
    text_name = write(tmp_path / 'graph.txt', '2 1\n0 1 5\n')

    assert len(graphio.load_graphs(json_name)) == 2
    assert len(graphio.load_graphs(text_name)) == 1


def test_text_to_json(tmp_path):
    text_name = write(tmp_path / 'graph.txt', '3 2\n0 1 5\n1 2 6\n')
    json_name = str(tmp_path / 'graph.json')
    graphio.text_to_json(text_name, json_name)

    graphs = graphio.read_json_graphs(json_name)
    assert len(graphs) == 1
    assert graphs[0].vertices == (0, 1, 2)
    assert graphs[0].edges == (Edge(0, 1, 5), Edge(1, 2, 6))


def test_write_text_graph_round_trip(tmp_path):
    graph = Graph(range(3), [(0, 1, 5), (2, 1, 6)])
    fname = str(tmp_path / 'graph.txt')
    graphio.write_text_graph(graph, fname)

    assert (tmp_path / 'graph.txt').read_text() == '3 2\n0 1 5\n2 1 6\n'


def test_write_results_json(tmp_path):
    graph = Graph.from_dict(INPUT['graphs'][0])
    record = graphio.result_record(graph, build_prim(graph), build_kruskal(graph))
    fname = str(tmp_path / 'output.json')
    graphio.write_results_json([record], fname)

    with open(fname) as f:
        data = json.load(f)

    (result,) = data['results']
    assert result['graph_id'] == 1
    assert result['input_stats'] == {'vertices': 4, 'edges': 4}
    assert result['prim']['mst_edges'] == [
        {'from': 'A', 'to': 'C', 'weight': 2},
        {'from': 'C', 'to': 'B', 'weight': 1},
        {'from': 'C', 'to': 'D', 'weight': 5},
    ]
    assert result['kruskal']['mst_edges'] == [
        {'from': 'B', 'to': 'C', 'weight': 1},
        {'from': 'A', 'to': 'C', 'weight': 2},
        {'from': 'C', 'to': 'D', 'weight': 5},
    ]
    assert result['prim']['total_cost'] == result['kruskal']['total_cost'] == 8
    assert result['prim']['operations_count'] == 12
    assert set(result['kruskal']) == {'mst_edges', 'total_cost', 'operations_count', 'execution_time_ms'}


def test_read_json_graphs_rejects_non_list_graphs(tmp_path):
    fname = write(tmp_path / 'input.json', '{"graphs": 5}')
    with pytest.raises(GraphError, match='"graphs" list'):
        graphio.read_json_graphs(fname)


def test_read_json_graphs_rejects_unhashable_node(tmp_path):
    data = {'graphs': [{'id': 1, 'nodes': [['A']], 'edges': []}]}
    fname = write(tmp_path / 'input.json', json.dumps(data))
    with pytest.raises(GraphError, match='not hashable'):
        graphio.read_json_graphs(fname)


def test_read_json_graphs_rejects_unhashable_endpoint(tmp_path):
    data = {'graphs': [{'id': 1, 'nodes': ['A'], 'edges': [{'from': 'A', 'to': ['A'], 'weight': 1}]}]}
    fname = write(tmp_path / 'input.json', json.dumps(data))
    with pytest.raises(GraphError, match='unknown vertex'):
        graphio.read_json_graphs(fname)


def test_read_json_graphs_rejects_non_object_graph(tmp_path):
    fname = write(tmp_path / 'input.json', '{"graphs": [5]}')
    with pytest.raises(GraphError, match='malformed'):
        graphio.read_json_graphs(fname)


def test_read_json_graphs_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / 'input.json'
    path.write_bytes(b'{"graphs": [\xff]}')
    with pytest.raises(GraphError, match='invalid JSON'):
        graphio.read_json_graphs(str(path))


def test_read_text_graph_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / 'graph.txt'
    path.write_bytes(b'2 1\n0 1 \xff\n')
    with pytest.raises(GraphError, match='not a text file'):
        graphio.read_text_graph(str(path))


def test_read_text_graph_empty_file(tmp_path):
    with pytest.raises(GraphError, match='header'):
        graphio.read_text_graph(write(tmp_path / 'graph.txt', ''))
