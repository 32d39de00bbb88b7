## Benchmark for comparing Prim's and Kruskal's algorithms on generated graphs

from typing import Any, Callable

import networkx as nx

import nx_utils
from graphmodel import Graph
from kruskal import build_kruskal
from prim import build_prim

BUILDERS = {
    'Prim': build_prim,
    'Kruskal': build_kruskal,
}

def run_builder(builder: Callable[[Graph], Any], graph: Graph, nreps: int) -> dict[str, Any]:
    results = [builder(graph) for _ in range(nreps)]

    metrics = {
        'compute_times': [r.elapsed_ms for r in results],
        'operations': results[0].operations,
        'num_edges': results[0].num_edges,
    }
    metrics['avg_compute_time'] = sum(metrics['compute_times'])/len(metrics['compute_times'])

    weights = [r.total_cost for r in results]
    if min(weights) == max(weights):
        metrics['weight'] = weights[0]

    return metrics

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl} relative to {baseline}:')
        all_tests = all_metrics[impl]
        comp_speedups = []
        for (test, metrics) in all_tests.items():
            base = all_metrics[baseline][test]
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            if 'weight' not in metrics or metrics['weight'] != base.get('weight'):
                print('Inconsistent result on this test')
                continue

            compute_time = metrics['avg_compute_time']
            comp_speedup = base['avg_compute_time'] / compute_time if compute_time else float('inf')
            comp_speedups.append(comp_speedup)

            print(f'    Weight = {metrics["weight"]},  Edges = {metrics["num_edges"]}')
            print(f'    {baseline}: time = {base["avg_compute_time"]:0.4f}ms,  ops = {base["operations"]}')
            print(f'    {impl}: time = {compute_time:0.4f}ms,  ops = {metrics["operations"]}')
            print(f'    Compute speedup={comp_speedup:0.2f}x, Operation ratio={base["operations"] / max(metrics["operations"], 1):0.2f}x')
            print()

        if comp_speedups:
            print(f'Average computation time speedup of {impl}: {sum(comp_speedups)/len(comp_speedups):0.2f}')
        print()

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description="Benchmark Prim's and Kruskal's MST implementations")
    parser.add_argument('--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args()

    def create_arb_weight_test(g_fxn: Callable[..., nx.Graph],
                               g_args: tuple[Any, ...]) -> Callable[[], Graph]:
        def inner():
            g = g_fxn(*g_args)
            return nx_utils.from_nx(g, nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed))

        return inner

    # Which impl is the one being benchmarked against
    BASELINE = 'Prim'

    tests = {
        '2-degree Circulant n=200':
            create_arb_weight_test(nx.circulant_graph,
                                   (200, [1, 2]),
            ),

        '2-degree Circulant n=800':
            create_arb_weight_test(nx.circulant_graph,
                                   (800, [1, 2]),
            ),

        'Connected Caveman Graph, 20 groups of size k=10, n=200':
            create_arb_weight_test(nx.connected_caveman_graph,
                                   (20, 10),
            ),

        'Binomial Graph, p=0.05 n=400':
            create_arb_weight_test(nx.fast_gnp_random_graph,
                                   (400, 0.05, args.seed),
            ),
    }

    all_metrics = {
        impl: {} for impl in BUILDERS.keys()
    }

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        for (impl, builder) in BUILDERS.items():
            print(f'  Running {impl} on test "{test_name}"...')

            metrics = run_builder(builder, graph, args.reps)
            if 'weight' not in metrics:
                print(f'!!! Error on {impl}: inconsistent outputs')

            all_metrics[impl][test_name] = metrics

            print('   ', {k: v for k, v in metrics.items() if k != 'compute_times'})
            print()
        print()

    print_stats(all_metrics, BASELINE)
