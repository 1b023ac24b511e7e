from collections import deque
from typing import Iterable, Optional, Set, Tuple

import networkx as nx

from ..apsp import ShortestPathTable
from ..graph import Vertex
from .base import Solver, Tour


def cheapest_edge(graph: nx.Graph, table: ShortestPathTable) -> Tuple[Vertex, Vertex]:
    best = None
    best_cost = float("inf")
    for u in table.vertices:
        for v in graph.neighbors(u):
            if v == u:
                continue
            cost = table.cost(u, v)
            if cost < best_cost:
                best = (u, v)
                best_cost = cost
    return best


def nearest_unvisited(
    vertex: Vertex, candidates: Iterable[Vertex], visited: Set[Vertex], table: ShortestPathTable
) -> Tuple[Optional[Vertex], float]:
    nearest = None
    nearest_cost = float("inf")
    for node in candidates:
        if node in visited:
            continue
        cost = table.cost(vertex, node)
        if cost < nearest_cost:
            nearest = node
            nearest_cost = cost
    return nearest, nearest_cost


def grow_fragment(graph: nx.Graph, table: ShortestPathTable) -> Tour:
    """
    Starts from the cheapest edge and repeatedly attaches the nearest
    unvisited vertex to whichever end of the path is closer to one.
    Equal distances extend the tail.
    """
    first, second = cheapest_edge(graph, table)
    path = deque([first, second])
    visited = {first, second}
    while len(path) < len(table):
        head_node, head_cost = nearest_unvisited(path[0], table.vertices, visited, table)
        tail_node, tail_cost = nearest_unvisited(path[-1], table.vertices, visited, table)
        if head_cost < tail_cost:
            path.appendleft(head_node)
            visited.add(head_node)
        else:
            path.append(tail_node)
            visited.add(tail_node)
    return tuple(path)


class ApproximateSolver(Solver):
    name = "approximate"
    min_graph_size = 3

    def find_tour(self, graph: nx.Graph, table: ShortestPathTable) -> Tour:
        return grow_fragment(graph, table)
