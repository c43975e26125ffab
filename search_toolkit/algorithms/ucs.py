# This code implements Uniform Cost Search (Dijkstra) by reusing the generic best-first search with h = 0.
# search_toolkit/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from .base import Solver
from .best_first import best_first_search
from ..core.metrics import SearchResult
from ..core.problem import Problem, ZeroHeuristic


def uniform_cost_search(problem: Problem, max_expansions: Optional[int] = None, track_memory: bool = False) -> SearchResult:
    return best_first_search(ZeroHeuristic(problem), name="UCS", max_expansions=max_expansions, track_memory=track_memory)


class UniformCostSolver(Solver):
    """Minimum total cost plan for any Problem with non-negative action costs."""
    name = "UCS"

    def __init__(self, problem: Problem, max_expansions: Optional[int] = None, track_memory: bool = False):
        super().__init__(problem, max_expansions, track_memory)

    def search(self) -> SearchResult:
        return uniform_cost_search(self.problem, self.max_expansions, self.track_memory)
