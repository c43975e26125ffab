# search_toolkit/algorithms/astar.py
from __future__ import annotations
from typing import Optional
from .base import Solver
from .best_first import best_first_search
from ..core.metrics import SearchResult
from ..core.problem import HeuristicProblem


def a_star_search(problem: HeuristicProblem, max_expansions: Optional[int] = None, track_memory: bool = False) -> SearchResult:
    return best_first_search(problem, name="A*", max_expansions=max_expansions, track_memory=track_memory)


class AStarSolver(Solver):
    """
    A* over a HeuristicProblem. With an admissible heuristic the plan is optimal;
    with any non-negative heuristic it is the cheapest plan the search came across.
    """
    name = "A*"

    def __init__(self, problem: HeuristicProblem, max_expansions: Optional[int] = None, track_memory: bool = False):
        super().__init__(problem, max_expansions, track_memory)

    def search(self) -> SearchResult:
        return a_star_search(self.problem, self.max_expansions, self.track_memory)
