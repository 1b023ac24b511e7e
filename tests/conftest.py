import random

import networkx as nx
import pytest

from ga4tsp.apsp import compute_shortest_paths
from ga4tsp.graph import add_edge, add_vertex, from_edges, reachable_vertices


SIX_VERTEX_EDGES = [
    ("1", "3", 1.0),
    ("2", "3", 2.0),
    ("3", "4", 3.0),
    ("3", "5", 4.0),
    ("6", "4", 1.0),
    ("6", "5", 5.0),
]


def random_graph(n: int, extra_edges: int, seed: int) -> nx.Graph:
    """Connected graph on points in the unit square: a random spanning path plus chords."""
    rng = random.Random(seed)
    graph = nx.Graph()
    for v in range(n):
        add_vertex(graph, v, (rng.random(), rng.random()))
    order = list(range(n))
    rng.shuffle(order)
    for a, b in zip(order, order[1:]):
        add_edge(graph, a, b)
    for _ in range(extra_edges):
        a, b = rng.sample(range(n), 2)
        add_edge(graph, a, b)
    return graph


@pytest.fixture
def six_vertex_graph():
    return from_edges(SIX_VERTEX_EDGES)


@pytest.fixture
def six_vertex_table(six_vertex_graph):
    return compute_shortest_paths(six_vertex_graph, reachable_vertices(six_vertex_graph, "6"))


@pytest.fixture(params=[1, 2, 3])
def small_graph(request):
    return random_graph(7, 6, seed=request.param)
