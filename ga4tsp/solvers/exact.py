import networkx as nx

from ..apsp import ShortestPathTable
from ..evaluation import tour_cost
from ..permutations import PermutationEnumerator
from .base import Solver, Tour


class ExactSolver(Solver):
    """Brute force over every ordering of the reachable vertices."""

    name = "exact"
    min_graph_size = 3

    def find_tour(self, graph: nx.Graph, table: ShortestPathTable) -> Tour:
        best = None
        best_cost = float("inf")
        for tour in PermutationEnumerator(table.vertices):
            cost = tour_cost(tour, table)
            if cost < best_cost:
                best = tour
                best_cost = cost
        return best
