from typing import Any, Iterable

from graphmodel import Edge, Graph


class OpCounter:
    """Tally of elementary operations for a single builder run."""

    def __init__(self) -> None:
        self.count = 0

    def tick(self, n: int = 1) -> None:
        self.count += n

    def __repr__(self):
        return f'OpCounter({self.count})'


class Result:
    """
    Output of one MST builder on one graph.

    `edges` is in selection order, `elapsed_ms` is wall time in milliseconds.
    """

    __slots__ = ('algorithm', 'edges', 'total_cost', 'operations', 'elapsed_ms')

    def __init__(self,
                 algorithm: str,
                 edges: Iterable[Edge],
                 operations: int,
                 elapsed_ms: float) -> None:
        edges = tuple(edges)
        object.__setattr__(self, 'algorithm', algorithm)
        object.__setattr__(self, 'edges', edges)
        object.__setattr__(self, 'total_cost', sum(e.weight for e in edges))
        object.__setattr__(self, 'operations', operations)
        object.__setattr__(self, 'elapsed_ms', elapsed_ms)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is read-only')

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def spans(self, graph: Graph) -> bool:
        return self.num_edges == graph.num_vertices() - 1

    def to_dict(self) -> dict[str, Any]:
        return {
            'mst_edges': [e.to_dict() for e in self.edges],
            'total_cost': self.total_cost,
            'operations_count': self.operations,
            'execution_time_ms': round(self.elapsed_ms, 2),
        }

    def __repr__(self):
        return (f'Result({self.algorithm}: {self.num_edges} edges, cost={self.total_cost}, '
                f'ops={self.operations}, {self.elapsed_ms:0.2f}ms)')
