import networkx as nx

from ..apsp import ShortestPathTable
from ..evolutionary import MINIMUM_GRAPH_SIZE, EvolutionarySearch, GeneticConfig
from ..genome import Individual
from ..parallel import MultiRestart, ParallelConfig
from .base import Solver, Tour


def _to_tour(individual: Individual, table: ShortestPathTable) -> Tour:
    return tuple(table.vertices[i] for i in individual.genes)


class GeneticSolver(Solver):
    name = "genetic"
    min_graph_size = MINIMUM_GRAPH_SIZE

    def __init__(self, config: GeneticConfig = None):
        self.cfg = config or GeneticConfig()

    def validate(self) -> None:
        self.cfg.validate()

    def find_tour(self, graph: nx.Graph, table: ShortestPathTable) -> Tour:
        return _to_tour(EvolutionarySearch(self.cfg, table).run(), table)


class ParallelGeneticSolver(Solver):
    """Runs ``config.threads`` independent genetic searches and keeps the best tour."""

    name = "parallel_genetic"
    min_graph_size = MINIMUM_GRAPH_SIZE

    def __init__(self, config: ParallelConfig = None):
        self.cfg = config or ParallelConfig()

    def validate(self) -> None:
        self.cfg.validate()

    def find_tour(self, graph: nx.Graph, table: ShortestPathTable) -> Tour:
        return _to_tour(MultiRestart(self.cfg, table).run(), table)
