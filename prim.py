import sys
import time

from graphmodel import Graph
from mstresult import OpCounter, Result


def build_prim(graph: Graph) -> Result:
    """
    Grow a tree from the first vertex, adding the lightest crossing edge each round.

    Every round rescans the whole edge list (O(V*E)), and every edge inspected
    counts as one operation. If a round finds no crossing edge the remaining
    vertices are unreachable and the partial tree is returned.
    """
    counter = OpCounter()
    start = time.perf_counter()

    visited = {graph.first_vertex}
    mst = []

    while len(visited) < graph.num_vertices():
        best = None

        for edge in graph.edges:
            counter.tick()

            if edge.u in visited and edge.v not in visited:
                candidate = edge
            elif edge.v in visited and edge.u not in visited:
                candidate = edge.reversed()
            else:
                continue

            # strict comparison, the first of equal weights wins
            if best is None or candidate.weight < best.weight:
                best = candidate

        if best is None:
            break

        mst.append(best)
        visited.add(best.v)

    elapsed = (time.perf_counter() - start) * 1000
    return Result('prim', mst, counter.count, elapsed)


if __name__ == '__main__':
    from mstanalysis import run_single

    sys.exit(run_single(build_prim))
