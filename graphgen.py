import argparse
import random
import sys

from typing import Optional

import numpy as np

from graphmodel import Edge, Graph
from kruskal import UnionFind


def random_adjacency(nvertices: int,
                     total_edges: int,
                     min_weight: int,
                     max_weight: int,
                     rng: random.Random) -> np.ndarray:
    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    for _ in range(total_edges):
        # Generate a random edge
        new_spot = False

        # keep trying until an unoccupied spot is found
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # weights are stored shifted by one so that 0 always means "no edge"
        adj_matrix[i, j] = rng.randint(min_weight, max_weight) - min_weight + 1

    return adj_matrix


def connect_components(adj_matrix: np.ndarray,
                       min_weight: int,
                       max_weight: int,
                       rng: random.Random) -> None:
    nvertices = adj_matrix.shape[0]
    uf = UnionFind(range(nvertices))
    for i, j in zip(*np.nonzero(adj_matrix)):
        uf.union(int(i), int(j))

    roots = sorted({uf.find(v) for v in range(nvertices)})

    # chain the components together with one bridge each
    for a, b in zip(roots, roots[1:]):
        i, j = min(a, b), max(a, b)
        adj_matrix[i, j] = rng.randint(min_weight, max_weight) - min_weight + 1


def generate_graph(nvertices: int,
                   density: float = 0.5,
                   min_weight: int = 1,
                   max_weight: int = 100,
                   seed: Optional[int] = None,
                   connected: bool = False,
                   graph_id: Optional[int] = None) -> Graph:
    if nvertices < 1:
        raise ValueError('a graph needs at least one vertex')
    if not 0 <= density <= 1:
        raise ValueError(f'density must be within [0, 1], got {density}')
    if min_weight > max_weight:
        raise ValueError(f'empty weight range [{min_weight}, {max_weight}]')

    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = random_adjacency(nvertices, total_edges, min_weight, max_weight, rng)
    if connected:
        connect_components(adj_matrix, min_weight, max_weight, rng)

    # Only the upper triangle is filled for undirected graphs
    edges = []
    for i in range(nvertices):
        for j in range(i+1, nvertices):
            if adj_matrix[i, j] != 0:
                edges.append(Edge(i, j, int(adj_matrix[i, j]) + min_weight - 1))

    return Graph(range(nvertices), edges, graph_id=graph_id)


def main(argv=None) -> int:
    from graphio import write_json_graphs, write_text_graph

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for MST analysis')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-n', '--count', default=1, type=int,
                        help='number of graphs to generate (JSON output only)')
    parser.add_argument('--connected', action='store_true',
                        help='bridge components so every graph is connected')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    as_json = args.outfile.endswith('.json')
    if args.count < 1:
        parser.error('--count must be at least 1')
    if args.count > 1 and not as_json:
        parser.error('--count > 1 requires a .json outfile')

    total_edges = int(args.density * args.nvertices * (args.nvertices-1) / 2)

    if not args.quiet:
        print(f'Generating {args.count} graph(s) on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({total_edges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    graphs = []
    try:
        for k in range(args.count):
            seed = None if args.seed is None else args.seed + k
            graphs.append(generate_graph(args.nvertices,
                                         args.density,
                                         args.min_weight,
                                         args.max_weight,
                                         seed=seed,
                                         connected=args.connected,
                                         graph_id=k + 1))
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if args.verbose:
        print()
        print('Graph edges:')
        for graph in graphs:
            print(f'  {graph}: {list(graph.edges)}')

    try:
        if as_json:
            write_json_graphs(graphs, args.outfile)
        else:
            write_text_graph(graphs[0], args.outfile)
    except OSError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
