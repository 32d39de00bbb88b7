from typing import Any, Iterable, NamedTuple, Optional


class GraphError(ValueError):
    pass


class Edge(NamedTuple):
    u: Any
    v: Any
    weight: int

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise GraphError(f'expected "<u> <v> <weight>", got {s.strip()!r}')
        try:
            return Edge(*[int(token) for token in parts])
        except ValueError:
            raise GraphError(f'non-integer token in edge line {s.strip()!r}') from None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> 'Edge':
        try:
            return Edge(d['from'], d['to'], d['weight'])
        except KeyError as e:
            raise GraphError(f'edge {d!r} is missing key {e.args[0]!r}') from None

    def to_dict(self) -> dict[str, Any]:
        return {'from': self.u, 'to': self.v, 'weight': self.weight}

    def reversed(self) -> 'Edge':
        return Edge(self.v, self.u, self.weight)

    def is_loop(self) -> bool:
        return self.u == self.v

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


class Graph:
    """
    An undirected, weighted graph for a single MST problem instance.

    The vertex order matters: the first vertex seeds Prim's algorithm.
    Graphs are checked on construction and not modified afterwards.
    """

    def __init__(self,
                 vertices: Iterable[Any],
                 edges: Iterable[Edge],
                 graph_id: Optional[int] = None) -> None:
        self.graph_id = graph_id
        try:
            self.vertices = tuple(vertices)
            self.edges = tuple(e if isinstance(e, Edge) else Edge(*e) for e in edges)
        except TypeError as e:
            raise GraphError(f'malformed vertices or edges in graph {self.name} ({e})') from None
        self._validate()

    def _validate(self) -> None:
        if not self.vertices:
            raise GraphError(f'graph {self.name} has no vertices')

        seen = set()
        for vertex in self.vertices:
            try:
                if vertex in seen:
                    raise GraphError(f'graph {self.name} lists vertex {vertex!r} twice')
                seen.add(vertex)
            except TypeError:
                raise GraphError(f'vertex {vertex!r} in graph {self.name} is not hashable') from None

        for edge in self.edges:
            # bool is an int subclass but never a meaningful weight
            if not isinstance(edge.weight, int) or isinstance(edge.weight, bool):
                raise GraphError(f'edge {edge} in graph {self.name} has a non-integer weight')
            for endpoint in (edge.u, edge.v):
                try:
                    known = endpoint in seen
                except TypeError:
                    known = False
                if not known:
                    raise GraphError(f'edge {edge} in graph {self.name} references '
                                     f'unknown vertex {endpoint!r}')

    @property
    def name(self) -> str:
        return '<unnamed>' if self.graph_id is None else str(self.graph_id)

    @property
    def first_vertex(self) -> Any:
        return self.vertices[0]

    def num_vertices(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        return len(self.edges)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> 'Graph':
        try:
            nodes = d['nodes']
            edges = [Edge.from_dict(e) for e in d['edges']]
        except KeyError as e:
            raise GraphError(f'graph description is missing key {e.args[0]!r}') from None
        except TypeError:
            raise GraphError(f'malformed graph description {d!r}') from None

        return cls(nodes, edges, graph_id=d.get('id'))

    def to_dict(self) -> dict[str, Any]:
        d = {
            'nodes': list(self.vertices),
            'edges': [e.to_dict() for e in self.edges],
        }
        if self.graph_id is not None:
            d = {'id': self.graph_id, **d}
        return d

    def __repr__(self):
        return f'Graph(id={self.graph_id}, vertices={len(self.vertices)}, edges={len(self.edges)})'
