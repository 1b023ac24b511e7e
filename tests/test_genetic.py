import logging
import random

import pytest

from ga4tsp.apsp import compute_shortest_paths
from ga4tsp.evaluation import batch_tour_costs, cost_tensor, tour_cost
from ga4tsp.evolutionary import EvolutionarySearch, GeneticConfig
from ga4tsp.genome import Individual, block_sizes, random_genes, recombine
from ga4tsp.graph import reachable_vertices


@pytest.mark.parametrize("length,parents,expected", [
    (6, 3, [2, 2, 2]),
    (7, 3, [2, 2, 3]),
    (4, 3, [1, 1, 2]),
    (9, 2, [4, 5]),
    (5, 4, [1, 1, 1, 2]),
])
def test_block_sizes(length, parents, expected):
    assert block_sizes(length, parents) == expected


@pytest.mark.parametrize("num_parents", [2, 3, 4])
@pytest.mark.parametrize("seed", range(20))
def test_children_are_permutations(seed, num_parents):
    rng = random.Random(seed)
    n = rng.randint(4, 12)
    parents = [random_genes(n, rng) for _ in range(num_parents)]
    child = recombine(parents, rng)
    assert sorted(child) == list(range(n))


def test_blocks_keep_parent_order():
    parents = [(0, 1, 2, 3, 4, 5), (5, 4, 3, 2, 1, 0), (2, 0, 4, 1, 3, 5)]
    child = recombine(parents, random.Random(0))
    blocks = {(0, 1), (5, 4), (2, 3)}
    found = {child[i : i + 2] for i in (0, 2, 4)}
    assert found == blocks


def test_batch_costs_match_tour_cost(six_vertex_table):
    rng = random.Random(1)
    tours = [random_genes(len(six_vertex_table), rng) for _ in range(8)]
    costs = batch_tour_costs(cost_tensor(six_vertex_table), tours)
    for genes, cost in zip(tours, costs):
        vertices = [six_vertex_table.vertices[i] for i in genes]
        assert cost == pytest.approx(tour_cost(vertices, six_vertex_table))


def test_parents_are_distinct(six_vertex_table):
    search = EvolutionarySearch(GeneticConfig(population_size=6, random_seed=4), six_vertex_table)
    for _ in range(50):
        parents = search.select_parents()
        assert len({id(p) for p in parents}) == 3


def test_population_size_is_kept(six_vertex_table):
    search = EvolutionarySearch(GeneticConfig(population_size=7, generations=4, random_seed=2), six_vertex_table)
    search.run()
    assert search.generation == 4
    assert len(search.population) == 7
    for ind in search.population:
        assert sorted(ind.genes) == list(range(6))


def test_single_generation_returns_initial_best(six_vertex_table):
    search = EvolutionarySearch(GeneticConfig(generations=1, random_seed=9), six_vertex_table)
    initial_best = min(ind.cost for ind in search.population)
    assert search.run().cost == initial_best
    assert search.generation == 1


def test_elitism_never_regresses(small_graph):
    table = compute_shortest_paths(small_graph, reachable_vertices(small_graph, 0))
    search = EvolutionarySearch(
        GeneticConfig(population_size=12, generations=15, elite_count=1, random_seed=3), table
    )
    history = [search.best().cost]
    while search.generation < search.cfg.generations:
        search.step()
        history.append(search.best().cost)
    assert all(b <= a for a, b in zip(history, history[1:]))


def test_same_seed_same_run(six_vertex_table):
    cfg = GeneticConfig(population_size=8, generations=6, random_seed=42)
    a = EvolutionarySearch(cfg, six_vertex_table).run()
    b = EvolutionarySearch(cfg, six_vertex_table).run()
    assert a.genes == b.genes


def _with_costs(search, costs):
    search.population = [Individual(ind.genes, c) for ind, c in zip(search.population, costs)]


def test_selection_weights_favour_cheap_tours(six_vertex_table):
    search = EvolutionarySearch(GeneticConfig(population_size=5, random_seed=1), six_vertex_table)
    costs = [10.0, 20.0, 15.0, 30.0, 25.0]
    _with_costs(search, costs)
    sampler = search._sampler()
    for i, cost in enumerate(costs):
        assert sampler.weight_of(i) == pytest.approx(1.2 * 30.0 - cost)
    assert sampler.total_weight == pytest.approx(5 * 36.0 - sum(costs))


def test_selection_weights_uniform_when_all_costs_zero(six_vertex_table):
    search = EvolutionarySearch(GeneticConfig(population_size=5, random_seed=1), six_vertex_table)
    _with_costs(search, [0.0] * 5)
    sampler = search._sampler()
    assert [sampler.weight_of(i) for i in range(5)] == [1.0] * 5


def test_step_skips_progress_stats_without_debug(six_vertex_table, monkeypatch):
    search = EvolutionarySearch(GeneticConfig(population_size=5, random_seed=1), six_vertex_table)
    calls = []
    monkeypatch.setattr(search, "best", lambda: calls.append(1))
    logging.getLogger("ga4tsp.evolutionary").setLevel(logging.INFO)
    try:
        search.step()
    finally:
        logging.getLogger("ga4tsp.evolutionary").setLevel(logging.NOTSET)
    assert calls == []
