# search_toolkit/algorithms/base.py
# Common shape of every solver: bound to one problem, `solve()` gives the plan or None,
# `search()` gives the full SearchResult. Each call starts from scratch.
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional
from ..core.metrics import SearchResult
from ..core.problem import Action, UnitProblem


class Solver(ABC):
    name = "Solver"

    def __init__(self, problem: UnitProblem, max_expansions: Optional[int] = None, track_memory: bool = False):
        self.problem = problem
        self.max_expansions = max_expansions
        self.track_memory = track_memory

    @abstractmethod
    def search(self) -> SearchResult:
        ...

    def solve(self) -> Optional[List[Action]]:
        """Actions leading from the initial state to a goal, or None if there is no solution."""
        return self.search().plan()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.problem!r})"
