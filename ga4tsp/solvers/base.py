import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

import networkx as nx

from ..apsp import ShortestPathTable, compute_shortest_paths
from ..errors import check_minimum
from ..evaluation import expand_tour, tour_cost
from ..graph import Vertex, reachable_vertices


logger = logging.getLogger(__name__)

Tour = Tuple[Vertex, ...]


@dataclass(frozen=True, eq=False)
class Solution:
    """Best tour found by a solver and the shortest-path table it was scored on."""

    tour: Tour
    table: ShortestPathTable
    solver_name: str

    @property
    def cost(self) -> float:
        return tour_cost(self.tour, self.table)

    def expand(self) -> List[Vertex]:
        return expand_tour(self.tour, self.table)


class Solver(ABC):
    name: str = "base"
    min_graph_size: int = 3

    def prepare(self, graph: nx.Graph, seed: Vertex) -> ShortestPathTable:
        vertices = reachable_vertices(graph, seed)
        check_minimum("Graph size", len(vertices), self.min_graph_size)
        return compute_shortest_paths(graph, vertices)

    def solve(self, graph: nx.Graph, seed: Vertex) -> Solution:
        self.validate()
        table = self.prepare(graph, seed)
        logger.info("%s: solving over %d vertices reachable from %r", self.name, len(table), seed)
        tour = tuple(self.find_tour(graph, table))
        solution = Solution(tour=tour, table=table, solver_name=self.name)
        logger.info("%s: tour cost %.4f", self.name, solution.cost)
        return solution

    def validate(self) -> None:
        pass

    @abstractmethod
    def find_tour(self, graph: nx.Graph, table: ShortestPathTable) -> Tour:
        raise NotImplementedError
