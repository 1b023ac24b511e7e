import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import torch

from .apsp import ShortestPathTable
from .errors import check_minimum
from .evaluation import batch_tour_costs, cost_tensor
from .genome import Genes, Individual, random_genes, recombine
from .sampling import WeightedSampler


logger = logging.getLogger(__name__)

# With a single generation only the random initial population is scored.
MINIMUM_GENERATIONS = 1
MINIMUM_POPULATION_SIZE = 5
MINIMUM_PARENTS = 2
# Enough vertices for three non-trivial gene blocks.
MINIMUM_GRAPH_SIZE = 4


@dataclass
class GeneticConfig:
    generations: int = 10
    population_size: int = 10
    num_parents: int = 3
    selection_pressure: float = 1.2
    elite_count: int = 0
    random_seed: Optional[int] = None

    def validate(self) -> None:
        check_minimum("Number of generations", self.generations, MINIMUM_GENERATIONS)
        check_minimum("Population size", self.population_size, MINIMUM_POPULATION_SIZE)
        check_minimum("Number of parents", self.num_parents, MINIMUM_PARENTS)
        # Two spare individuals keep the last parent draw from being forced.
        check_minimum("Population size", self.population_size, self.num_parents + 2)
        check_minimum("Elite count", self.elite_count, 0)
        if self.elite_count >= self.population_size:
            raise ValueError(
                f"Elite count {self.elite_count} must be smaller than the population size {self.population_size}."
            )
        if not self.selection_pressure > 1.0:
            raise ValueError(f"Selection pressure must exceed 1.0, got {self.selection_pressure}.")


class EvolutionarySearch:
    """
    One genetic run over a fixed table. Individuals are tours of table
    indices; every generation is bred from weighted picks of the previous one
    and replaces it wholesale.
    """

    def __init__(
        self,
        config: GeneticConfig,
        table: ShortestPathTable,
        rng: random.Random = None,
        dist: torch.Tensor = None,
    ):
        self.cfg = config
        self.table = table
        self.rng = rng or random.Random(config.random_seed)
        self.dist = dist if dist is not None else cost_tensor(table)
        self.generation = 1
        self.population: List[Individual] = self._score(
            [random_genes(len(table), self.rng) for _ in range(config.population_size)]
        )

    def _score(self, genes: List[Genes]) -> List[Individual]:
        costs = batch_tour_costs(self.dist, genes)
        return [Individual(g, c) for g, c in zip(genes, costs)]

    def _sampler(self) -> WeightedSampler:
        max_cost = max(ind.cost for ind in self.population)
        sampler = WeightedSampler(self.rng)
        for i, ind in enumerate(self.population):
            weight = self.cfg.selection_pressure * max_cost - ind.cost
            # All-zero costs leave nothing to prefer.
            sampler.add(i, weight if max_cost > 0.0 else 1.0)
        return sampler

    def select_parents(self) -> List[Individual]:
        sampler = self._sampler()
        parents = []
        while len(parents) < self.cfg.num_parents:
            i = sampler.sample()
            sampler.remove(i)
            parents.append(self.population[i])
        return parents

    def breed(self) -> Genes:
        parents = self.select_parents()
        return recombine([p.genes for p in parents], self.rng)

    def step(self) -> None:
        elites = sorted(self.population, key=lambda ind: ind.cost)[: self.cfg.elite_count]
        children = [self.breed() for _ in range(self.cfg.population_size - len(elites))]
        self.population = elites + self._score(children)
        self.generation += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "generation %d: best=%.4f mean=%.4f",
                self.generation,
                self.best().cost,
                sum(ind.cost for ind in self.population) / len(self.population),
            )

    def best(self) -> Individual:
        best = None
        for ind in self.population:
            if best is None or ind.cost < best.cost:
                best = ind
        return best

    def run(self) -> Individual:
        while self.generation < self.cfg.generations:
            self.step()
        return self.best()
