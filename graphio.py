import json

from typing import Any, Iterable

from graphmodel import Edge, Graph, GraphError
from mstresult import Result

'''
Text format:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

JSON format:

{"graphs": [{"id": 1, "nodes": ["A", ...], "edges": [{"from": "A", "to": "B", "weight": 4}, ...]}]}
'''


def read_text_graph(fname: str, graph_id: int = 1) -> Graph:
    try:
        with open(fname, 'r') as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise GraphError(f'{fname}: not a text file ({e})') from None

    header = lines[0].split() if lines else []
    if len(header) != 2:
        raise GraphError(f'{fname}: expected "<nvertices> <nedges>" header')
    try:
        nvertices = int(header[0])
        nedges = int(header[1])
    except ValueError:
        raise GraphError(f'{fname}: non-integer header {" ".join(header)!r}') from None

    edges = []

    for line in lines[1:]:
        if line.strip():
            edges.append(Edge.from_line(line))

    if len(edges) != nedges:
        raise GraphError(f'{fname}: header announces {nedges} edges, found {len(edges)}')

    return Graph(range(nvertices), edges, graph_id=graph_id)


def read_json_graphs(fname: str) -> list[Graph]:
    with open(fname, 'r') as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise GraphError(f'{fname}: invalid JSON ({e})') from None

    if not isinstance(data, dict) or not isinstance(data.get('graphs'), list):
        raise GraphError(f'{fname}: expected an object with a "graphs" list')

    return [Graph.from_dict(g) for g in data['graphs']]


def load_graphs(fname: str) -> list[Graph]:
    if fname.endswith('.json'):
        return read_json_graphs(fname)
    return [read_text_graph(fname)]


def write_text_graph(graph: Graph, fname: str) -> None:
    with open(fname, 'w') as f:
        f.write(f'{graph.num_vertices()} {graph.num_edges()}\n')
        for edge in graph.edges:
            f.write(f'{edge.u} {edge.v} {edge.weight}\n')


def write_json_graphs(graphs: Iterable[Graph], fname: str) -> None:
    with open(fname, 'w') as f:
        json.dump({'graphs': [g.to_dict() for g in graphs]}, f, indent=2)


def result_record(graph: Graph, prim: Result, kruskal: Result) -> dict[str, Any]:
    return {
        'graph_id': graph.graph_id,
        'input_stats': {
            'vertices': graph.num_vertices(),
            'edges': graph.num_edges(),
        },
        'prim': prim.to_dict(),
        'kruskal': kruskal.to_dict(),
    }


def write_results_json(records: Iterable[dict[str, Any]], fname: str) -> None:
    with open(fname, 'w') as f:
        json.dump({'results': list(records)}, f, indent=2)


def text_to_json(infile_name: str, outfile_name: str) -> None:
    write_json_graphs([read_text_graph(infile_name)], outfile_name)


if __name__ == '__main__':
    import argparse
    import sys

    parser = argparse.ArgumentParser(prog='graphio',
                                     description='Convert text graph files to the JSON input format')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)

    args = parser.parse_args()

    try:
        text_to_json(args.infile, args.outfile)
    except (GraphError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
