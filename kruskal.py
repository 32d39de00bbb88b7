import sys
import time

from typing import Any, Iterable, Optional

from graphmodel import Graph
from mstresult import OpCounter, Result


class UnionFind:
    def __init__(self, vertices: Iterable[Any], counter: Optional[OpCounter] = None) -> None:
        self.parent = {v: v for v in vertices}
        self.counter = counter if counter is not None else OpCounter()

    def find(self, vertex: Any) -> Any:
        root = vertex

        # one operation per node on the path, root included
        self.counter.tick()
        while self.parent[root] != root:
            root = self.parent[root]
            self.counter.tick()

        # path compression
        while self.parent[vertex] != root:
            next_vertex = self.parent[vertex]
            self.parent[vertex] = root
            vertex = next_vertex

        return root

    def union(self, a: Any, b: Any) -> bool:
        self.counter.tick()
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False

        # no rank heuristic, b's root always becomes the parent
        self.parent[a] = b
        return True

    def connected(self, a: Any, b: Any) -> bool:
        return self.find(a) == self.find(b)


def build_kruskal(graph: Graph) -> Result:
    counter = OpCounter()
    start = time.perf_counter()

    # sorted() is stable, so equal weights keep their input order
    edges = sorted(graph.edges, key=lambda e: e.weight)
    uf = UnionFind(graph.vertices, counter)
    target = graph.num_vertices() - 1
    mst = []

    # perform kruskals
    for edge in edges:
        if len(mst) == target:
            break

        counter.tick()
        if not uf.connected(edge.u, edge.v):
            mst.append(edge)
            uf.union(edge.u, edge.v)

    elapsed = (time.perf_counter() - start) * 1000
    return Result('kruskal', mst, counter.count, elapsed)


if __name__ == '__main__':
    from mstanalysis import run_single

    sys.exit(run_single(build_kruskal))
