import math
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from .errors import MissingSeedError


Vertex = Hashable
Position = Tuple[float, float]


def euclidean(p: Position, q: Position) -> float:
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return math.sqrt(dx * dx + dy * dy)


def add_vertex(graph: nx.Graph, vertex: Vertex, pos: Optional[Position] = None) -> None:
    if pos is None:
        graph.add_node(vertex)
    else:
        graph.add_node(vertex, pos=(float(pos[0]), float(pos[1])))


def add_edge(graph: nx.Graph, u: Vertex, v: Vertex, weight: Optional[float] = None) -> float:
    """
    Adds an undirected edge and returns its weight. Without an explicit weight
    the Euclidean distance between the endpoints' ``pos`` attributes is used.
    """
    if weight is None:
        pu = graph.nodes[u].get("pos") if u in graph else None
        pv = graph.nodes[v].get("pos") if v in graph else None
        if pu is None or pv is None:
            raise ValueError(f"Cannot derive weight of edge ({u!r}, {v!r}): coordinates missing.")
        weight = euclidean(pu, pv)
    weight = float(weight)
    if not math.isfinite(weight) or weight < 0.0:
        raise ValueError(f"Edge ({u!r}, {v!r}) has invalid weight {weight}.")
    graph.add_edge(u, v, weight=weight)
    return weight


def from_edges(
    edges: Iterable[Sequence],
    positions: Optional[Dict[Vertex, Position]] = None,
) -> nx.Graph:
    graph = nx.Graph()
    for vertex, pos in (positions or {}).items():
        add_vertex(graph, vertex, pos)
    for edge in edges:
        if len(edge) == 3:
            add_edge(graph, edge[0], edge[1], edge[2])
        else:
            add_edge(graph, edge[0], edge[1])
    return graph


def reachable_vertices(graph: nx.Graph, seed: Vertex) -> List[Vertex]:
    """Vertices connected to ``seed`` in breadth-first discovery order, seed first."""
    if seed is None:
        raise MissingSeedError("The seed vertex is None.")
    if seed not in graph:
        raise MissingSeedError(f"The seed vertex {seed!r} is not in the graph.")
    return [seed] + [v for _, v in nx.bfs_edges(graph, seed)]
