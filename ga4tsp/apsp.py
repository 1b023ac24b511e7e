import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import networkx as nx
import numpy as np

from .graph import Vertex


logger = logging.getLogger(__name__)

NO_HOP = -1


@dataclass(frozen=True, eq=False)
class ShortestPathTable:
    """
    All-pairs shortest-path costs and next hops over a fixed vertex list.
    ``costs[i, j]`` is the cheapest i -> j cost and ``hops[i, j]`` the index of
    the first vertex to step to from i when heading for j. Both matrices are
    read-only so one table can be shared between threads.
    """

    vertices: Tuple[Vertex, ...]
    costs: np.ndarray
    hops: np.ndarray
    _index: Dict[Vertex, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_index", {v: i for i, v in enumerate(self.vertices)})
        self.costs.flags.writeable = False
        self.hops.flags.writeable = False

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vertex) -> bool:
        return vertex in self._index

    def index_of(self, vertex: Vertex) -> int:
        return self._index[vertex]

    def cost(self, u: Vertex, v: Vertex) -> float:
        return float(self.costs[self._index[u], self._index[v]])

    def next_hop(self, u: Vertex, v: Vertex) -> Optional[Vertex]:
        hop = self.hops[self._index[u], self._index[v]]
        if hop == NO_HOP:
            return None
        return self.vertices[hop]

    def path(self, u: Vertex, v: Vertex) -> Optional[List[Vertex]]:
        if u not in self._index or v not in self._index:
            return None
        i = self._index[u]
        j = self._index[v]
        if self.hops[i, j] == NO_HOP:
            return None
        path = [u]
        while i != j:
            i = int(self.hops[i, j])
            path.append(self.vertices[i])
        return path


def compute_shortest_paths(graph: nx.Graph, vertices: Sequence[Vertex]) -> ShortestPathTable:
    """
    Floyd-Warshall over ``vertices``. The intermediate vertex is the outermost
    loop; for a fixed k all (i, j) pairs are relaxed at once since row k and
    column k do not change during pass k.
    """
    vertices = tuple(vertices)
    n = len(vertices)
    index = {v: i for i, v in enumerate(vertices)}
    costs = np.full((n, n), np.inf, dtype=np.float64)
    hops = np.full((n, n), NO_HOP, dtype=np.int64)

    for u in vertices:
        i = index[u]
        for v, attrs in graph[u].items():
            j = index.get(v)
            if j is None or i == j:
                continue
            weight = attrs.get("weight", 1.0)
            if weight < 0.0:
                raise ValueError(f"Edge ({u!r}, {v!r}) has negative weight {weight}.")
            if weight < costs[i, j]:
                costs[i, j] = weight
                costs[j, i] = weight
                hops[i, j] = j
                hops[j, i] = i
    diag = np.arange(n)
    costs[diag, diag] = 0.0
    hops[diag, diag] = diag

    for k in range(n):
        via = costs[:, k, None] + costs[None, k, :]
        improved = via < costs
        if not improved.any():
            continue
        costs = np.where(improved, via, costs)
        hops = np.where(improved, hops[:, k, None], hops)

    logger.debug("computed shortest paths over %d vertices", n)
    return ShortestPathTable(vertices=vertices, costs=costs, hops=hops)
