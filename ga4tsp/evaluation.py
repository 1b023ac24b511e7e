from typing import List, Sequence

import torch

from .apsp import ShortestPathTable
from .graph import Vertex


def tour_cost(tour: Sequence[Vertex], table: ShortestPathTable) -> float:
    cost = 0.0
    n = len(tour)
    for i in range(n):
        a = tour[i]
        b = tour[(i + 1) % n]
        cost += table.cost(a, b)
    return float(cost)


def expand_tour(tour: Sequence[Vertex], table: ShortestPathTable) -> List[Vertex]:
    """
    Replaces every cyclic hop of ``tour`` by its concrete shortest path,
    dropping the vertex shared by consecutive sub-paths.
    """
    n = len(tour)
    if n == 1:
        return [tour[0]]
    route: List[Vertex] = []
    for i in range(n):
        path = table.path(tour[i], tour[(i + 1) % n])
        if path is None:
            raise ValueError(f"No path between {tour[i]!r} and {tour[(i + 1) % n]!r}.")
        route.extend(path[:-1])
    return route


def cost_tensor(table: ShortestPathTable) -> torch.Tensor:
    return torch.tensor(table.costs.copy(), dtype=torch.float64)


def batch_tour_costs(dist: torch.Tensor, tours: Sequence[Sequence[int]]) -> List[float]:
    """Cyclic costs of index-encoded tours, one row per tour."""
    if not tours:
        return []
    idx = torch.tensor(tours, device=dist.device, dtype=torch.long)
    return dist[idx, idx.roll(-1, dims=1)].sum(dim=1).tolist()
