from __future__ import annotations
import logging
from typing import Optional, Set
from .base import Solver
from ..core.frontiers import FIFOQueue
from ..core.node import Node
from ..core.metrics import SearchResult, MeasuredRun
from ..core.problem import State, UnitProblem
from ..core.utils import reconstruct_path

logger = logging.getLogger(__name__)


def breadth_first_search(problem: UnitProblem, max_expansions: Optional[int] = None, track_memory: bool = False) -> SearchResult:
    """
    BFS with the goal test on dequeue and states marked when first dequeued,
    so the first goal dequeued lies at minimum depth. Costs are never consulted;
    the reported cost is the number of actions.
    """
    name = "BFS"
    frontier = FIFOQueue(Node(problem.initial_state()))
    marked: Set[State] = set()
    expanded = 0

    with MeasuredRun(track_memory) as meter:
        while frontier:
            node = frontier.pop()
            if problem.is_goal(node.state):
                actions = reconstruct_path(node)
                logger.debug("%s: goal %r at depth %d after %d expansions", name, node.state, node.depth, expanded)
                return SearchResult(name, True, actions, len(actions), expanded, meter.elapsed, meter.peak_kb)
            if node.state in marked:
                continue

            if max_expansions is not None and expanded >= max_expansions:
                logger.debug("%s: stopped after %d expansions", name, expanded)
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                                    error="max_expansions reached")

            marked.add(node.state)
            expanded += 1
            for child in node.expand(problem):
                frontier.push(child)

    logger.debug("%s: frontier exhausted after %d expansions", name, expanded)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)


class BreadthFirstSolver(Solver):
    """Fewest-actions plan for problems where every action costs the same."""
    name = "BFS"

    def search(self) -> SearchResult:
        return breadth_first_search(self.problem, self.max_expansions, self.track_memory)
