from .base import Solution, Solver, Tour
from .exact import ExactSolver
from .genetic import GeneticSolver, ParallelGeneticSolver
from .heuristics import ApproximateSolver, cheapest_edge, grow_fragment, nearest_unvisited

__all__ = [
    "Solver",
    "Solution",
    "Tour",
    "ExactSolver",
    "ApproximateSolver",
    "GeneticSolver",
    "ParallelGeneticSolver",
    "cheapest_edge",
    "grow_fragment",
    "nearest_unvisited",
]
