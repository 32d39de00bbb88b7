## Runs Prim's and Kruskal's algorithms side by side and reports their metrics

import sys

from typing import Any, Callable

from graphio import load_graphs, result_record, write_results_json
from graphmodel import Graph, GraphError
from kruskal import build_kruskal
from mstresult import Result
from prim import build_prim


def analyze(graph: Graph) -> tuple[Result, Result]:
    return build_prim(graph), build_kruskal(graph)


def describe_disconnection(graph: Graph, prim: Result, kruskal: Result) -> str:
    return (f'graph {graph.name} is disconnected: '
            f'kruskal found {kruskal.num_edges}/{graph.num_vertices() - 1} edges, '
            f'prim reached {prim.num_edges + 1}/{graph.num_vertices()} vertices')


def find_mismatches(graph: Graph, prim: Result, kruskal: Result, verify: bool = False) -> list[str]:
    mismatches = []

    if kruskal.spans(graph) and prim.total_cost != kruskal.total_cost:
        mismatches.append(f'graph {graph.name}: prim cost {prim.total_cost} != kruskal cost {kruskal.total_cost}')

    if verify:
        import nx_utils

        seeded, total = nx_utils.reference_cost(graph)
        if prim.total_cost != seeded:
            mismatches.append(f'graph {graph.name}: prim cost {prim.total_cost} != networkx cost {seeded}')
        if kruskal.total_cost != total:
            mismatches.append(f'graph {graph.name}: kruskal cost {kruskal.total_cost} != networkx cost {total}')

    return mismatches


def print_stats(records: list[dict[str, Any]]) -> None:
    print(f'{"Graph":<7} {"V":>5} {"E":>6}   '
          f'{"Prim cost":>9} {"ops":>9} {"ms":>8}   '
          f'{"Kruskal cost":>12} {"ops":>9} {"ms":>8}')
    print('-' * 88)

    for record in records:
        stats = record['input_stats']
        prim = record['prim']
        kruskal = record['kruskal']
        print(f'{str(record["graph_id"]):<7} {stats["vertices"]:>5} {stats["edges"]:>6}   '
              f'{prim["total_cost"]:>9} {prim["operations_count"]:>9} {prim["execution_time_ms"]:>8.2f}   '
              f'{kruskal["total_cost"]:>12} {kruskal["operations_count"]:>9} {kruskal["execution_time_ms"]:>8.2f}')


def run_single(builder: Callable[[Graph], Result], argv=None) -> int:
    '''Command-line entry for running one builder: <filename> [verbose]'''
    argv = sys.argv if argv is None else argv

    if len(argv) < 2:
        print(f'Usage: {argv[0]} <filename>')
        return 1

    fname = argv[1]
    verbose = (len(argv) > 2)

    try:
        graphs = load_graphs(fname)
    except (GraphError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    for graph in graphs:
        result = builder(graph)
        print('Final MST sum:', result.total_cost)
        if verbose:
            print(list(result.edges))

    return 0


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='mstanalysis',
                                     description="Compare Prim's and Kruskal's MST algorithms")
    parser.add_argument('-i', '--infile', default='ass_3_input.json',
                        help='graphs to analyze (.json, or the plain text edge list format)')
    parser.add_argument('-o', '--outfile', default='ass_3_output.json')
    parser.add_argument('--verify', action='store_true',
                        help='cross-check MST costs against networkx')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    try:
        graphs = load_graphs(args.infile)
    except (GraphError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    records = []
    ok = True
    for graph in graphs:
        if args.verbose:
            print(f'Running both algorithms on graph {graph.name} '
                  f'({graph.num_vertices()} vertices, {graph.num_edges()} edges)...')

        prim, kruskal = analyze(graph)
        records.append(result_record(graph, prim, kruskal))

        if args.verbose:
            print(f'  {prim}')
            print(f'  {kruskal}')

        if not kruskal.spans(graph) and not args.quiet:
            print(f'Note: {describe_disconnection(graph, prim, kruskal)}')

        mismatches = find_mismatches(graph, prim, kruskal, verify=args.verify)
        if mismatches:
            ok = False
        for mismatch in mismatches:
            print(f'!!! {mismatch}', file=sys.stderr)

    try:
        write_results_json(records, args.outfile)
    except OSError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if not args.quiet:
        print()
        print_stats(records)
        print()
        print(f'Results saved to {args.outfile}')

    return 0 if ok else 2


if __name__ == '__main__':
    sys.exit(main())
