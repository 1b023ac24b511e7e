import concurrent.futures
import logging
import os
import random
from dataclasses import dataclass, field
from typing import List

from .apsp import ShortestPathTable
from .errors import WorkerFailedError, check_minimum
from .evaluation import cost_tensor
from .evolutionary import EvolutionarySearch, GeneticConfig
from .genome import Individual


logger = logging.getLogger(__name__)

MINIMUM_THREADS = 2


def _default_threads() -> int:
    return max(MINIMUM_THREADS, os.cpu_count() or MINIMUM_THREADS)


@dataclass
class ParallelConfig(GeneticConfig):
    threads: int = field(default_factory=_default_threads)

    def validate(self) -> None:
        super().validate()
        check_minimum("Thread count", self.threads, MINIMUM_THREADS)


def worker_seeds(cfg: ParallelConfig) -> List[int]:
    master = random.Random(cfg.random_seed)
    return [master.getrandbits(64) for _ in range(cfg.threads)]


class MultiRestart:
    """
    Independent genetic runs on worker threads. Each run owns its random
    source and population; only the read-only table is shared. No
    individuals move between runs.
    """

    def __init__(self, cfg: ParallelConfig, table: ShortestPathTable):
        self.cfg = cfg
        self.table = table
        dist = cost_tensor(table)
        self.searches: List[EvolutionarySearch] = [
            EvolutionarySearch(cfg, table, rng=random.Random(seed), dist=dist)
            for seed in worker_seeds(cfg)
        ]

    def run(self) -> Individual:
        with concurrent.futures.ThreadPoolExecutor(max_workers=len(self.searches)) as ex:
            futures = [ex.submit(search.run) for search in self.searches]
            concurrent.futures.wait(futures)
        results: List[Individual] = []
        failures = []
        for i, future in enumerate(futures):
            if future.cancelled():
                failures.append((i, concurrent.futures.CancelledError()))
            elif future.exception() is not None:
                failures.append((i, future.exception()))
            else:
                results.append(future.result())
        if failures:
            raise WorkerFailedError(failures, len(futures)) from failures[0][1]
        best = results[0]
        for ind in results[1:]:
            if ind.cost < best.cost:
                best = ind
        logger.debug("best of %d runs: %.4f", len(results), best.cost)
        return best
