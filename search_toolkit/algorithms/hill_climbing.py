# search_toolkit/algorithms/hill_climbing.py
# Steepest descent on the heuristic: no frontier, no tables, no cycle check.
from __future__ import annotations
import logging
from typing import Optional, Tuple
from .base import Solver
from ..core.node import Node
from ..core.metrics import SearchResult, MeasuredRun
from ..core.problem import HeuristicProblem
from ..core.utils import heuristic_value, reconstruct_path

logger = logging.getLogger(__name__)


def best_successor(problem: HeuristicProblem, node: Node) -> Optional[Tuple[Node, int]]:
    """Successor with the lowest h strictly below h(node); the first one wins ties."""
    best = None
    best_h = heuristic_value(problem, node.state)
    for child in node.expand(problem):
        hv = heuristic_value(problem, child.state)
        if hv < best_h:
            best, best_h = child, hv
    return None if best is None else (best, best_h)


def hill_climbing_search(problem: HeuristicProblem, max_expansions: Optional[int] = None, track_memory: bool = False) -> SearchResult:
    """
    Hill-Climbing (steepest descent on h). Stops at a goal, or fails as soon as no
    successor strictly improves the heuristic. Terminates whenever h is bounded below
    over the states it visits, since h strictly decreases at every step.
    """
    name = "Hill-Climbing"
    node = Node(problem.initial_state())
    expanded = 0

    with MeasuredRun(track_memory) as meter:
        while not problem.is_goal(node.state):
            if max_expansions is not None and expanded >= max_expansions:
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                                    error="max_expansions reached")
            expanded += 1
            step = best_successor(problem, node)
            if step is None:
                logger.debug("%s: stuck at %r after %d steps", name, node.state, expanded)
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)
            node, _ = step

        actions = reconstruct_path(node)
        logger.debug("%s: goal %r after %d steps", name, node.state, len(actions))
        return SearchResult(name, True, actions, len(actions), expanded, meter.elapsed, meter.peak_kb)


class HillClimbingSolver(Solver):
    name = "Hill-Climbing"

    def __init__(self, problem: HeuristicProblem, max_expansions: Optional[int] = None, track_memory: bool = False):
        super().__init__(problem, max_expansions, track_memory)

    def search(self) -> SearchResult:
        return hill_climbing_search(self.problem, self.max_expansions, self.track_memory)
