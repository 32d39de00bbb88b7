import networkx as nx
import random

from typing import Any, Callable, Iterable, Optional

from graphmodel import Edge, Graph

def arbitrary_weight(low: int, high: int, seed: Optional[int]=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def from_nx(g: nx.Graph,
            decide_weight: Callable[[Any, Any], int],
            nodename: Callable[[Any], Any]= lambda x: x,
            graph_id: Optional[int]=None) -> Graph:
    vertices = [nodename(node) for node in g.nodes]
    edges = [Edge(nodename(u), nodename(v), decide_weight(u, v)) for u, v in g.edges]
    return Graph(vertices, edges, graph_id=graph_id)

def to_nx(graph: Graph) -> nx.MultiGraph:
    # MultiGraph keeps parallel edges and self-loops as given
    g = nx.MultiGraph()
    g.add_nodes_from(graph.vertices)
    for edge in graph.edges:
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g

def reference_cost(graph: Graph) -> tuple[int, int]:
    '''
    Cost of the minimum spanning forest computed by networkx, returned as
    (cost within the component of the first vertex, cost over the whole graph).
    '''
    g = to_nx(graph)
    forest = nx.minimum_spanning_tree(g, weight='weight')
    seed_component = nx.node_connected_component(g, graph.first_vertex)

    total = 0
    seeded = 0
    for u, _v, w in forest.edges(data='weight'):
        total += w
        if u in seed_component:
            seeded += w

    return seeded, total

def is_forest(vertices: Iterable[Any], edges: Iterable[Edge]) -> bool:
    g = nx.MultiGraph()
    g.add_nodes_from(vertices)
    g.add_edges_from((e.u, e.v) for e in edges)
    return nx.is_forest(g)

def is_connected(graph: Graph) -> bool:
    return nx.is_connected(to_nx(graph))
