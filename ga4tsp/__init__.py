"""
Exact and approximate Traveling Salesman tours over the connected component
of a seed vertex: shortest-path precomputation, brute force, greedy fragment
growth and a multi-parent genetic algorithm with parallel restarts.
"""

__all__ = [
    "apsp",
    "errors",
    "evaluation",
    "evolutionary",
    "genome",
    "graph",
    "parallel",
    "permutations",
    "sampling",
    "solvers",
]
